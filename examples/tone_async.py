"""
Example: async tone analysis of a short document.

Environment variables:
- TONE_ANALYZER_USERNAME / TONE_ANALYZER_PASSWORD
- TONE_ANALYZER_VERSION (defaults to 2017-09-21)
"""
import asyncio
import json
import os

from watson_cloud import ServiceConfig, ToneAnalyzerV3, ToneParams


async def main() -> None:
    username = os.environ.get("TONE_ANALYZER_USERNAME")
    password = os.environ.get("TONE_ANALYZER_PASSWORD")
    if not (username and password):
        raise SystemExit("Set TONE_ANALYZER_USERNAME and TONE_ANALYZER_PASSWORD.")
    config = ServiceConfig.from_credentials(
        username, password, version=os.environ.get("TONE_ANALYZER_VERSION", "2017-09-21")
    )

    async with ToneAnalyzerV3(config) as analyzer:
        result = await analyzer.tone_async(
            ToneParams(
                tone_input={"text": "Team, I know the deadline moved. I'm confident we can make it."},
                content_type="application/json",
                sentences=True,
            )
        )
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    asyncio.run(main())
