from app.core.config import REQUIRED_GOOGLE_SETTINGS, Settings


def test_missing_google_settings_lists_every_unset_name():
    settings = Settings(_env_file=None, GOOGLE_SHEET_ID="sheet-123")

    missing = settings.missing_google_settings()

    assert "GOOGLE_SHEET_ID" not in missing
    assert missing == [name for name in REQUIRED_GOOGLE_SETTINGS if name != "GOOGLE_SHEET_ID"]


def test_private_key_quotes_and_escaped_newlines_are_fixed():
    settings = Settings(_env_file=None, GOOGLE_PRIVATE_KEY='  "line1\\nline2\\n"  ')

    assert settings.formatted_private_key() == "line1\nline2\n"


def test_private_key_with_real_newlines_is_untouched():
    settings = Settings(_env_file=None, GOOGLE_PRIVATE_KEY="line1\nline2")

    assert settings.formatted_private_key() == "line1\nline2"


def test_service_account_info_encodes_client_email():
    settings = Settings(_env_file=None, GOOGLE_CLIENT_EMAIL="bot@proj.iam.gserviceaccount.com")

    info = settings.service_account_info()

    assert info["type"] == "service_account"
    assert info["client_x509_cert_url"].endswith("bot%40proj.iam.gserviceaccount.com")
