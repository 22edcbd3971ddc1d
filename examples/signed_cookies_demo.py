#!/usr/bin/env python3
"""
Signed Cookies Example
======================

Shows how a request/response cycle uses a signed jar:
seed it from the request, read authenticated values, set new ones,
and collect the delta for the response.

Usage:
    python signed_cookies_demo.py
"""

import tempfile
from pathlib import Path

from signedjar import Cookie, CookieJar, SigningConfig, create_signed_jar


def main():
    """Demonstrate a signed jar across two requests."""

    print("=== Signed Cookies Demo ===\n")

    with tempfile.TemporaryDirectory() as tmp:
        config = SigningConfig(key_file=str(Path(tmp) / "signing.key"))

        # First request: no cookies yet, server sets a session
        jar = CookieJar()
        signed = create_signed_jar(jar, config)
        signed.add(Cookie("session", "user=42", path="/"))

        response_cookies = jar.delta()
        for cookie in response_cookies:
            print(f"🍪 Set-Cookie: {cookie.name}={cookie.value}")

        # Second request: the client sends the cookie back
        jar = CookieJar()
        signed = create_signed_jar(jar, config)
        for cookie in response_cookies:
            signed.parent.add_original(cookie)

        session = signed.get("session")
        print(f"✅ Authenticated session: {session.value}")

        # A client editing the value is caught
        forged = response_cookies[0].with_value(
            response_cookies[0].value.replace("user=42", "user=1")
        )
        print(f"🚫 Forged cookie accepted? {signed.verify(forged) is not None}")

        # Logging out removes the original cookie
        signed.remove(Cookie("session", path="/"))
        for cookie in jar.delta():
            print(f"🗑️  Removal: {cookie.name}={cookie.value!r} max_age={cookie.max_age}")


if __name__ == "__main__":
    main()
