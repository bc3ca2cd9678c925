# scripts/check_badge_api.py
# 對本機或已部署的 badge API 做 smoke test：
#   python scripts/check_badge_api.py [API_URL]
import sys
import time
import json
import requests
from urllib.parse import quote

DEFAULT_URL = "http://localhost:8000"
REQUIRED_FIELDS = ["schemaVersion", "label", "message", "color", "namedLogo"]


def validate_badge(data: dict) -> list[str]:
    """Return a list of problems with a Shields endpoint payload (empty when valid)."""
    problems = [f"missing field: {f}" for f in REQUIRED_FIELDS if f not in data]

    if data.get("schemaVersion") != 1:
        problems.append(f"schemaVersion is {data.get('schemaVersion')}, expected 1")
    if data.get("namedLogo") != "spotify":
        problems.append(f"namedLogo is {data.get('namedLogo')!r}, expected 'spotify'")
    if not isinstance(data.get("isError"), bool):
        problems.append(f"isError should be boolean, got {type(data.get('isError')).__name__}")

    return problems


def shields_badge_url(api_url: str) -> str:
    return (
        "https://img.shields.io/endpoint"
        f"?url={quote(api_url, safe='')}"
        "&style=flat-square&logo=spotify&labelColor=000&color=1DB954"
    )


def main(argv: list[str]) -> int:
    if "-h" in argv or "--help" in argv:
        print("Usage: python scripts/check_badge_api.py [API_URL]")
        return 0

    url = argv[0] if argv else DEFAULT_URL
    print(f"API URL: {url}")

    try:
        started = time.time()
        response = requests.get(url, timeout=15)
        elapsed_ms = int((time.time() - started) * 1000)

        print(f"Response Status: {response.status_code}")
        print(f"Response Time: {elapsed_ms}ms")
        print("--- Response Headers ---")
        for name in ("Content-Type", "Cache-Control", "Access-Control-Allow-Origin"):
            print(f"   {name}: {response.headers.get(name)}")

        response.raise_for_status()
        data = response.json()

    except requests.exceptions.HTTPError as err:
        print(f"HTTP 錯誤發生: {err}")
        print("Response Body:", response.text)
        return 1
    except requests.exceptions.RequestException as err:
        print(f"連線錯誤發生 (請確認 uvicorn 服務是否啟動): {err}")
        return 1

    print("--- API 回傳結果 ---")
    print(json.dumps(data, indent=4, ensure_ascii=False))

    problems = validate_badge(data)
    for p in problems:
        print(f"   ✗ {p}")
    if not problems:
        print("   ✔ Valid Shields endpoint payload")

    badge_url = shields_badge_url(url)
    print("\nBadge URL:")
    print(badge_url)
    print("\nMarkdown:")
    print(f"![Spotify]({badge_url})")

    return 1 if problems else 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
