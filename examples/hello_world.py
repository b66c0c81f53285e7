#!/usr/bin/env python3
"""
loginllama — Hello World

Checks a few login attempts against a simulated LoginLlama API, showing
the three ways the client finds the caller's IP and User-Agent.

Usage:
    python examples/hello_world.py
"""

from __future__ import annotations

import asyncio
import json

import httpx

from loginllama import CheckResult, HttpxTransport, LoginLlama, LoginCheckStatus

# ─── Simulated API (answers in JSON:API format) ───


def fake_api(request: httpx.Request) -> httpx.Response:
    body = json.loads(request.content)
    suspicious = body["ip_address"].startswith("185.")
    attributes = {
        "status": "fail" if suspicious else "pass",
        "message": "Suspicious login" if suspicious else "Valid login",
        "risk_codes": [LoginCheckStatus.KNOWN_VPN] if suspicious else [LoginCheckStatus.VALID],
        "risk_score": 8 if suspicious else 0,
        "authentication_outcome": body["authentication_outcome"],
    }
    return httpx.Response(
        200,
        json={"data": {"attributes": attributes}, "meta": {"environment": "sandbox"}},
    )


def show(label: str, result: CheckResult) -> None:
    print(f"  {label:<24} status={result.status:<8} score={result.risk_score}  codes={result.codes}")


async def main():
    transport = HttpxTransport("sk_demo", http_transport=httpx.MockTransport(fake_api))
    loginllama = LoginLlama("sk_demo", transport=transport)

    # 1. Explicit values
    show(
        "explicit",
        await loginllama.check("alice@acme.com", ip_address="203.0.113.9", user_agent="Mozilla/5.0"),
    )

    # 2. A request (here: WSGI environ behind a proxy)
    environ = {
        "REMOTE_ADDR": "10.0.0.2",
        "HTTP_X_FORWARDED_FOR": "10.0.0.7, 185.220.101.4",
        "HTTP_USER_AGENT": "curl/8.5",
    }
    show("from request", await loginllama.report_failure("bob@acme.com", request=environ))

    # 3. Context recorded by the middleware hook
    loginllama.middleware()({"REMOTE_ADDR": "198.51.100.20", "HTTP_USER_AGENT": "Safari/17"})
    show("from middleware context", await loginllama.report_success("carol@acme.com"))


if __name__ == "__main__":
    asyncio.run(main())
