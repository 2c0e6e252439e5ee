#!/usr/bin/env python3
"""
Environment and Provider Diagnostics Script

This script prints the runtime configuration for the LLM provider.
Use this to verify that:
1. LLM_PROVIDER names a supported provider (openai or gemini)
2. An API key is available for that provider
3. The provider client can be constructed

Usage:
    cd apps/backend
    python scripts/inspect_env.py
"""

import os
import sys

# Add app to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def _mask(value):
    if not value:
        return "❌ NOT SET"
    return f"✅ Set (...{value[-4:]})" if len(value) > 8 else "✅ Set"


def main():
    print("=" * 60)
    print("ATS Resume Analyzer Provider Diagnostics")
    print("=" * 60)

    from app.core.config import settings, LLMConfig
    from app.agent.exceptions import ConfigurationError

    print("\n🤖 LLM Configuration:")
    print(f"  LLM_PROVIDER:        {settings.LLM_PROVIDER}")
    print(f"  LL_MODEL:            {settings.LL_MODEL or '(provider default)'}")
    print(f"  LLM_TEMPERATURE:     {settings.LLM_TEMPERATURE}")
    print(f"  LLM_MAX_TOKENS:      {settings.LLM_MAX_TOKENS}")
    print(f"  LLM_TIMEOUT_SECONDS: {settings.LLM_TIMEOUT_SECONDS}")
    print(f"  LLM_BASE_URL:        {settings.LLM_BASE_URL or '(not set)'}")
    print(f"  LLM_API_KEY:         {_mask(settings.LLM_API_KEY)}")
    print(f"  OPENAI_API_KEY:      {_mask(settings.OPENAI_API_KEY)}")
    print(f"  GEMINI_API_KEY:      {_mask(settings.GEMINI_API_KEY)}")
    print(f"  RESPONSE_LANGUAGE:   {settings.RESPONSE_LANGUAGE}")

    print("\n✅ VALIDATION CHECKS")
    print("-" * 40)

    try:
        config = LLMConfig.from_settings(settings)
    except ConfigurationError as e:
        print(f"❌ {e}")
        print("\nFix this before running the application.")
        sys.exit(1)
    print(f"✅ Provider '{config.provider}' with model '{config.model}'")

    print("\n🔧 RUNTIME INSTANTIATION TEST")
    print("-" * 40)
    try:
        from app.agent.manager import AgentManager

        mgr = AgentManager(config=config)
        print(f"✅ AgentManager built {type(mgr.provider).__name__}")
    except Exception as e:
        print(f"❌ Failed to instantiate provider: {e}")
        sys.exit(1)

    print("\n" + "=" * 60)
    print("✅ ALL CHECKS PASSED")
    sys.exit(0)


if __name__ == "__main__":
    main()
