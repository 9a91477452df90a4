#!/usr/bin/env python3
"""
Stream a synthetic walk to a running PawPulse API, one sample per request.

The IR channel is a pulse wave at --bpm beats per minute and the
accelerometer carries one gait bump per step at --cadence steps per minute,
both sampled at --rate Hz and posted in real time so the server's clock
sees the true spacing.

Usage examples:
  - Local dev server:
      uvicorn pawpulse.main:app --app-dir backend --port 8000 &
      python scripts/replay_walk.py --base-url http://localhost:8000 --seconds 20
  - Against a stored profile:
      python scripts/replay_walk.py --base-url http://localhost:8000 --dog-id 1
"""

from __future__ import annotations

import argparse
import math
import random
import time
import uuid

import requests


def pulse_ir(t: float, bpm: float, baseline: float = 40.0, amplitude: float = 160.0) -> float:
    """Sharp systolic peak followed by a slow decay, like a PPG trace."""
    phase = (t * bpm / 60.0) % 1.0
    return baseline + amplitude * math.exp(-phase * 6.0) + random.uniform(-3, 3)


def gait_accel(t: float, cadence: float) -> tuple[float, float, float]:
    """Gravity on z plus one half-sine bump per step."""
    phase = (t * cadence / 60.0) % 1.0
    bump = 1.2 * math.sin(math.pi * phase / 0.4) if phase < 0.4 else 0.0
    return (
        random.gauss(0, 0.05),
        random.gauss(0, 0.05),
        1.0 + bump + random.gauss(0, 0.05),
    )


def post_sample(base_url: str, payload: dict) -> dict:
    url = f"{base_url.rstrip('/')}/sensor_data"
    r = requests.post(url, json=payload, timeout=15)
    if r.status_code >= 300:
        raise RuntimeError(f"sensor_data -> HTTP {r.status_code}: {r.text}")
    return r.json()


def main() -> None:
    ap = argparse.ArgumentParser(description="Replay a synthetic walk to the sensor endpoint")
    ap.add_argument("--base-url", required=True, help="API base URL (e.g., http://localhost:8000)")
    ap.add_argument("--session-id", default=None, help="Session id (default: random)")
    ap.add_argument("--dog-id", type=int, default=None, help="Stored dog profile to use for calories")
    ap.add_argument("--seconds", type=float, default=30.0)
    ap.add_argument("--rate", type=float, default=25.0, help="Samples per second")
    ap.add_argument("--bpm", type=float, default=90.0)
    ap.add_argument("--cadence", type=float, default=120.0, help="Steps per minute")
    ap.add_argument("--speed", type=float, default=3.0, help="Walking speed sent for calories")
    args = ap.parse_args()

    session_id = args.session_id or f"replay-{uuid.uuid4().hex[:8]}"
    profile = (
        {"dog_id": args.dog_id}
        if args.dog_id is not None
        else {"dog_breed": "Labrador", "weight": 20, "age": "adult (1-7 years)", "sex": "male"}
    )

    dt = 1.0 / args.rate
    n = int(args.seconds * args.rate)
    start = time.monotonic()
    data = {}
    for i in range(n):
        t = i * dt
        x, y, z = gait_accel(t, args.cadence)
        payload = {
            "session_id": session_id,
            "speed": args.speed,
            "ir_value": pulse_ir(t, args.bpm),
            "x": x,
            "y": y,
            "z": z,
            **profile,
        }
        data = post_sample(args.base_url, payload)
        if i % int(args.rate) == 0:
            print(f"t={t:5.1f}s bpm={data['bpm']:3d} steps={data['steps']:4d} kcal={data['caloriesBurnt']:.1f}")
        sleep_for = start + (i + 1) * dt - time.monotonic()
        if sleep_for > 0:
            time.sleep(sleep_for)

    expected_steps = int(args.seconds * args.cadence / 60.0)
    print(f"Replay complete: session {session_id}, bpm={data.get('bpm')} (sent {args.bpm:.0f}), "
          f"steps={data.get('steps')} (sent ~{expected_steps}).")


if __name__ == "__main__":
    main()
