"""
Microbenchmark: time per substep for every demo.
Run:
  python benchmarks/bench_steps.py
"""
import time

from physics_demos.demos import DemoKind, create_simulation
from physics_demos.profiler import Profiler


def run(kind: DemoKind, frames: int = 600):
    prof = Profiler()
    sim = create_simulation(kind, profiler=prof)
    sim.start()

    # warmup
    for _ in range(30):
        sim.tick(1 / 60)

    steps = 0
    t0 = time.perf_counter()
    for _ in range(frames):
        if sim.finished:
            sim.start()
        steps += sim.tick(1 / 60)
    t1 = time.perf_counter()

    total = t1 - t0
    per_step = total / max(steps, 1)
    return per_step, steps, prof.stats.substeps_per_tick(), prof.stats.summary()


if __name__ == "__main__":
    for kind in DemoKind:
        per_step, steps, per_tick, summary = run(kind)
        print(f"{kind.value:12s} steps={steps:6d}  step={1e6*per_step:8.2f} us  steps/s={1/per_step:10.1f}  substeps/tick={per_tick:5.2f}")
        for k in ["physics", "sampling"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
