"""
Example: translate text and identify its language.

Environment variables:
- LANGUAGE_TRANSLATOR_USERNAME / LANGUAGE_TRANSLATOR_PASSWORD
- LANGUAGE_TRANSLATOR_TOKEN (bearer token, alternative to username/password)
- LANGUAGE_TRANSLATOR_URL (optional)
"""
import json
import os

from watson_cloud import LanguageTranslatorV2, ServiceConfig, TranslateParams


def main() -> None:
    url = os.environ.get("LANGUAGE_TRANSLATOR_URL")
    username = os.environ.get("LANGUAGE_TRANSLATOR_USERNAME")
    password = os.environ.get("LANGUAGE_TRANSLATOR_PASSWORD")
    token = os.environ.get("LANGUAGE_TRANSLATOR_TOKEN")
    if token:
        config = ServiceConfig.from_authorization_token(token, url=url)
    elif username and password:
        config = ServiceConfig.from_credentials(username, password, url=url)
    else:
        raise SystemExit("Set LANGUAGE_TRANSLATOR_USERNAME/PASSWORD or LANGUAGE_TRANSLATOR_TOKEN.")

    with LanguageTranslatorV2(config) as translator:
        result = translator.translate(TranslateParams(text="Hello, how are you?", source="en", target="es"))
        print(json.dumps(result, indent=2))

        def show(error, body, response):
            if error:
                print(f"identify failed: {error}")
            else:
                print(body)

        translator.identify_plain({"text": "Wie geht es dir?"}, callback=show)


if __name__ == "__main__":
    main()
