"""Simple sanity check script to exercise each writing style."""

from __future__ import annotations

from typing import Any

import httpx

API_URL = "http://localhost:8000/api/writing"


def run_sample(text: str, payload: dict[str, Any]) -> None:
    """Send a sample request and dump the response."""
    with httpx.Client(timeout=60.0) as client:
        response = client.post(API_URL, json={"text": text, **payload})
        response.raise_for_status()
        data = response.json()
        print(f"Style: {payload['style']}")
        print(f"CORS origin: {response.headers.get('access-control-allow-origin')}")
        print(f"Output: {data['result']}")
        print("-" * 60)


def main() -> None:
    """Invoke each writing style with canned text."""
    sample_text = "hey, we was thinking maybe you could send over them numbers by friday if its ok"
    scenarios = [
        {"style": "casual"},
        {"style": "proofread"},
        {"style": "professional"},
        {"style": "persuasive"},
        {"style": "freestyle", "freestyle": "Turn this into a two-line haiku-ish reminder."},
    ]

    for payload in scenarios:
        run_sample(sample_text, payload)


if __name__ == "__main__":
    main()
