#!/usr/bin/env python3
# This project was developed with assistance from AI tools.
"""Live smoke suite for the ParkQueue API.

Exercises every REST endpoint against a running server instance.

Prerequisites:
  - API server running (uvicorn parkqueue.main:app)

Usage:
  ./scripts/live-tests.py                          # localhost:8000
  ./scripts/live-tests.py --base http://host:8080  # another server
"""

import argparse
import asyncio
import sys
from datetime import UTC, datetime, timedelta

import httpx

HEADERS = {"Origin": "http://localhost:3000"}

# ---------------------------------------------------------------------------
# Test runner
# ---------------------------------------------------------------------------

PASS = 0
FAIL = 0
ERRORS: list[str] = []
SECTION = ""


def section(name: str):
    global SECTION
    SECTION = name
    print(f"\n{'=' * 60}")
    print(f"  {name}")
    print(f"{'=' * 60}\n")


def ok(name: str, passed: bool, detail: str = ""):
    global PASS, FAIL
    if passed:
        PASS += 1
        print(f"  PASS  {name}")
    else:
        FAIL += 1
        msg = f"[{SECTION}] {name}: {detail}" if detail else f"[{SECTION}] {name}"
        ERRORS.append(msg)
        print(f"  FAIL  {name} -- {detail}")


# ---------------------------------------------------------------------------
# 1. Health
# ---------------------------------------------------------------------------

async def test_health(c: httpx.AsyncClient):
    section("Health")

    r = await c.get("/health/")
    ok("GET /health/ returns 200", r.status_code == 200)
    data = r.json()
    ok("response is a list", isinstance(data, list))
    ok("API status is healthy",
       any(s.get("name") == "API" and s.get("status") == "healthy" for s in data))

    r = await c.get("/")
    ok("GET / root returns 200", r.status_code == 200)


# ---------------------------------------------------------------------------
# 2. Payment form
# ---------------------------------------------------------------------------

async def test_payment_form(c: httpx.AsyncClient):
    section("Payment form (public)")

    r = await c.get("/api/public/exit-windows")
    ok("GET exit-windows returns 200", r.status_code == 200)
    codes = [o.get("code") for o in r.json()]
    ok("first window is 'now'", codes[:1] == ["now"], str(codes))
    ok("eight windows offered", len(codes) == 8, str(len(codes)))

    r = await c.post("/api/public/exit-estimate", json={
        "exit_window": "30min",
        "paid_at": "2026-03-01T12:00:00+00:00",
    })
    ok("POST exit-estimate returns 200", r.status_code == 200)
    ok("label is 'In 30 minutes'", r.json().get("label") == "In 30 minutes")

    r = await c.post("/api/public/exit-estimate", json={"paid_at": "not a date"})
    ok("bad timestamp returns 422", r.status_code == 422)


# ---------------------------------------------------------------------------
# 3. Exit queue ranking
# ---------------------------------------------------------------------------

async def test_exit_queue(c: httpx.AsyncClient):
    section("Exit queue (admin)")

    now = datetime.now(UTC)
    payload = {
        "now": now.isoformat(),
        "payments": [
            {"payment_id": "relaxed", "paid_at": now.isoformat(), "exit_window": "60min"},
            {"payment_id": "walk-in", "paid_at": now.isoformat()},
            {"payment_id": "late",
             "paid_at": (now - timedelta(minutes=3)).isoformat(),
             "exit_window": "now"},
        ],
    }
    r = await c.post("/api/admin/pending-payments/ranked", json=payload)
    ok("POST pending-payments/ranked returns 200", r.status_code == 200)
    order = [item["record"]["payment_id"] for item in r.json()]
    ok("ranked most urgent first", order == ["late", "relaxed", "walk-in"], str(order))
    late = r.json()[0]["urgency"]
    ok("late payment is overdue", late.get("is_overdue") is True, str(late))
    ok("late status text", late.get("status_text") == "OVERDUE 3 min!", late.get("status_text", ""))

    r = await c.post("/api/admin/pending-payments/ranked", json={"payments": [{}]})
    ok("missing paid_at returns 422", r.status_code == 422)
    ok("422 is problem details", r.json().get("title") == "Unprocessable Entity")


async def main():
    parser = argparse.ArgumentParser(description="Live smoke suite for the ParkQueue API")
    parser.add_argument("--base", default="http://localhost:8000",
                        help="Base URL of the running server")
    args = parser.parse_args()

    print("=" * 60)
    print("  LIVE TEST SUITE -- ParkQueue API")
    print("=" * 60)

    async with httpx.AsyncClient(base_url=args.base, headers=HEADERS, timeout=15) as c:

        # Pre-flight: make sure server is up
        try:
            r = await c.get("/health/")
            if r.status_code != 200:
                print(f"\n  Server returned {r.status_code} on /health/ -- is it running?")
                sys.exit(2)
        except httpx.ConnectError:
            print(f"\n  Cannot connect to server at {args.base} -- is it running?")
            sys.exit(2)

        await test_health(c)
        await test_payment_form(c)
        await test_exit_queue(c)

    # Summary
    print(f"\n{'=' * 60}")
    print(f"  RESULTS: {PASS} passed, {FAIL} failed")
    print(f"{'=' * 60}")

    if ERRORS:
        print("\nFailures:")
        for e in ERRORS:
            print(f"  - {e}")

    sys.exit(0 if FAIL == 0 else 1)


if __name__ == "__main__":
    asyncio.run(main())
