"""
Basic Requests
==============

Uses minihttpie as a library: one configured client, a GET and a POST built
from ``key=value`` tokens, each rendered the way the command line does it.
"""

import minihttpie


def main() -> None:
    with minihttpie.build_client() as client:
        # ── GET ──────────────────────────────────────────────────────────
        response = minihttpie.get(client, minihttpie.validate_url("https://httpbin.org/get"))
        minihttpie.render(response)
        print()

        # ── POST with a JSON body ────────────────────────────────────────
        pairs = [minihttpie.parse_kv_pair(token) for token in ("name=bob", "age=18")]
        response = minihttpie.post(client, "https://httpbin.org/post", pairs)
        minihttpie.render(response)


if __name__ == "__main__":
    main()
