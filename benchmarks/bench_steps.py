"""
Microbenchmark: time per tick vs number of bodies (brute force O(N²)).
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from charge_sim import ChargeSystem, ChargedBody, BoundaryConfig, TraceConfig
from charge_sim.profiler import Profiler

def run(n: int, steps: int = 50):
    prof = Profiler()
    system = ChargeSystem(
        boundary=BoundaryConfig(radius=10.0),
        trace_config=TraceConfig(max_points=30),
        drag_c=0.5,
        profiler=prof,
    )

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)

    # half positive, half negative, scattered in a ball of radius 10
    for i in range(n):
        direction = rng.normal(size=3)
        direction /= np.linalg.norm(direction)
        pos = direction * 10.0 * rng.random() ** (1 / 3)
        sign = 1.0 if i % 2 == 0 else -1.0
        system.add_body(ChargedBody(
            charge=sign * rng.uniform(0.5, 1.5),
            mass=rng.uniform(1.0, 3.0),
            position=pos,
        ))

    # warmup
    for _ in range(5):
        system.step()

    t0 = time.perf_counter()
    for _ in range(steps):
        system.step()
    t1 = time.perf_counter()

    t2 = time.perf_counter()
    lines = system.field_lines()
    t3 = time.perf_counter()

    return (t1 - t0) / steps, t3 - t2, len(lines), prof.stats.summary()

if __name__ == "__main__":
    for n in [10, 25, 50, 100]:
        per_step, trace_time, n_lines, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}  "
              f"field_lines={n_lines} in {1e3*trace_time:8.1f} ms")
        for k in ["forces", "integrate"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
