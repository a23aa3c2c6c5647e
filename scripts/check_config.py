"""
Check SMS Desk configuration

Shows which external services are configured and whether the
app will run with OpenAI or templates, Twilio or demo mode.

Usage: python scripts/check_config.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from app.core.config import Settings, validate_settings  # noqa: E402


def main() -> int:
    config = Settings()

    print("=" * 60)
    print("  SMS Desk Configuration Check")
    print("=" * 60 + "\n")

    print(f"Environment: {config.ENVIRONMENT}")
    print(f"Sender: {config.YOUR_NAME} ({config.YOUR_BUSINESS})\n")

    print(f"OpenAI API Key: {'✅ Set' if config.OPENAI_API_KEY else '❌ Not set'}")
    print(f"OpenAI Model: {config.OPENAI_MODEL}")
    print(f"Composer mode: {'openai' if config.composer_available else 'template'}\n")

    print(f"Account SID: {config.TWILIO_ACCOUNT_SID[:10]}..." if config.TWILIO_ACCOUNT_SID else "Account SID: ❌ Not set")
    print(f"Auth Token: {'✅ Set' if config.TWILIO_AUTH_TOKEN else '❌ Not set'}")
    print(f"Phone Number: {config.TWILIO_PHONE_NUMBER or '❌ Not set'}")
    print(f"Gateway mode: {'twilio' if config.gateway_available else 'demo'}\n")

    try:
        validate_settings(config)
    except ValueError as e:
        print(f"❌ {e}")
        return 1

    print("✅ Configuration valid")
    return 0


if __name__ == "__main__":
    sys.exit(main())
