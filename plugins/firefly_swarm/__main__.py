"""
Firefly Swarm - Headless Runner

Usage:
    python -m firefly_swarm [function] [options]

Examples:
    python -m firefly_swarm
    python -m firefly_swarm rastrigin --steps 200
    python -m firefly_swarm himmelblau --n 60 --gamma 0.5 --seed 7
    python -m firefly_swarm sphere --frames 1200 --speed 20

Options:
    --n N           Number of fireflies (default 40)
    --gamma G       Light absorption coefficient (default 1.0)
    --beta0 B       Base attractiveness (default 1.0)
    --alpha A       Randomization strength (default 0.2)
    --steps S       Generations to run (default 100)
    --frames F      Run F animation frames instead of bare generations
    --speed V       Generations per second in frame mode (default 10)
    --seed K        Random seed
    --list          List available functions

Functions:
    michalewicz, rastrigin, rosenbrock, himmelblau, sphere
"""

import sys

from .errors import FireflySwarmError
from .functions import FUNCTION_ORDER, list_functions, lookup
from .simulator import SwarmSimulator, report
from .swarm import FireflySwarm

_FLOAT_ARGS = {"--gamma": "gamma", "--beta0": "beta0", "--alpha": "alpha"}


def run_steps(swarm, steps):
    """Run bare generations, printing progress about ten times."""
    every = max(1, steps // 10)
    for _ in range(steps):
        swarm.step()
        if swarm.generation % every == 0 or swarm.generation == steps:
            report(swarm.get_stats())
    return swarm.get_stats()


def main(argv=None):
    function_key = "michalewicz"
    params = {}
    steps = 100
    frames = 0
    speed = 10.0
    seed = None

    args = sys.argv[1:] if argv is None else list(argv)
    i = 0
    try:
        while i < len(args):
            arg = args[i]
            if arg == "--n" and i + 1 < len(args):
                params["n"] = int(args[i + 1])
                i += 2
            elif arg in _FLOAT_ARGS and i + 1 < len(args):
                params[_FLOAT_ARGS[arg]] = float(args[i + 1])
                i += 2
            elif arg == "--steps" and i + 1 < len(args):
                steps = int(args[i + 1])
                i += 2
            elif arg == "--frames" and i + 1 < len(args):
                frames = int(args[i + 1])
                i += 2
            elif arg == "--speed" and i + 1 < len(args):
                speed = float(args[i + 1])
                i += 2
            elif arg == "--seed" and i + 1 < len(args):
                seed = int(args[i + 1])
                i += 2
            elif arg == "--list":
                print("\nAvailable functions:")
                for key, name in list_functions():
                    print(f"    {key:14s} {name}")
                print()
                return 0
            elif arg in ("--help", "-h"):
                print(__doc__)
                return 0
            elif arg in [k.value for k in FUNCTION_ORDER]:
                function_key = arg
                i += 1
            else:
                print(f"Unknown argument: {arg}")
                print("Use --list to see available functions")
                return 2
    except ValueError:
        print(f"Bad value for {args[i]}: {args[i + 1]!r}")
        return 2

    try:
        swarm = FireflySwarm(seed=seed, function_key=function_key, **params)
        sim = SwarmSimulator(swarm, speed=speed) if frames > 0 else None
    except FireflySwarmError as e:
        print(f"[firefly] {e}")
        return 2

    func = lookup(function_key)
    print("Starting Firefly Swarm")
    print(f"  Function: {func.name}  {func.domain}")
    print(f"  Params: {swarm.get_params()}")
    print()

    if sim is not None:
        stats = sim.run(frames, verbose=True)
    else:
        stats = run_steps(swarm, steps)

    print()
    print(f"Finished after {stats['generation']} generations")
    print(f"  Best value: {stats['best_value']:.6f}")
    print(f"  Best position: ({stats['best_x']:.6f}, {stats['best_y']:.6f})")
    for ox, oy, ov in func.optima:
        print(f"  Known optimum: ({ox}, {oy}) -> {ov}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
