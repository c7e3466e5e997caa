"""
Duplicate-create check for student intake.

- Fires N concurrent identical POST /students
- Prints the status codes and bodies (expect N x 201, each with a distinct id;
  intake has no dedup key)
"""

from __future__ import annotations

import argparse
import asyncio

import httpx


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser()
    p.add_argument("--base", default="http://localhost:8000")
    p.add_argument("--name", default="John")
    p.add_argument("--birth-date", default="2000-01-29")
    p.add_argument("--dni", default="12345678A")
    p.add_argument("--n", type=int, default=5, help="number of concurrent requests")
    return p.parse_args()


async def run():
    args = parse_args()
    payload = {"name": args.name, "birthDate": args.birth_date, "dni": args.dni}

    async with httpx.AsyncClient(timeout=10) as c:

        async def hit(i: int):
            resp = await c.post(f"{args.base}/students", json=payload)
            return i, resp.status_code, resp.text[:200]

        results = await asyncio.gather(*(hit(i) for i in range(args.n)))
        print("payload:", payload)
        for i, code, body in results:
            print(f"req#{i}: {code} {body}")


if __name__ == "__main__":
    asyncio.run(run())
