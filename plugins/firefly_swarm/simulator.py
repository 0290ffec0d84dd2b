"""
SwarmSimulator - Headless frame loop for a FireflySwarm

Reproduces the pacing of the interactive app without drawing anything:
generations run at a fixed rate (speed, generations per second) while
the flash clock advances every frame by the elapsed time scaled by
time_scale (lower = slower flashes).

Usage:
    from firefly_swarm.swarm import FireflySwarm
    from firefly_swarm.simulator import SwarmSimulator
    sim = SwarmSimulator(FireflySwarm(seed=1), speed=10)
    stats = sim.run(600)   # 600 frames of ~16 ms
"""

from .errors import InvalidParameter

FIRST_FRAME_MS = 16.0  # raw delta used for the first frame after (re)start


def report(stats):
    """Print one progress line for a stats dict from FireflySwarm.get_stats()."""
    print(f"[firefly] gen {stats['generation']:5d}  "
          f"best {stats['best_value']:.6f}  "
          f"at ({stats['best_x']:.4f}, {stats['best_y']:.4f})")


class SwarmSimulator:

    def __init__(self, swarm, speed=1.0, time_scale=0.05):
        """
        Args:
            swarm: FireflySwarm to drive
            speed: Generations per second
            time_scale: Multiplier from wall-clock ms to flash-clock ms
        """
        self.swarm = swarm
        self.speed = 1.0
        self.time_scale = 0.05
        self.set_speed(speed)
        self.set_time_scale(time_scale)

        self.running = False
        self.last_step_time = 0.0
        self.last_frame_time = None

    def set_speed(self, speed):
        if not speed > 0:
            raise InvalidParameter(f"speed must be > 0, got {speed!r}")
        self.speed = float(speed)

    def set_time_scale(self, time_scale):
        if not time_scale >= 0:
            raise InvalidParameter(f"time_scale must be >= 0, got {time_scale!r}")
        self.time_scale = float(time_scale)

    @property
    def step_interval(self):
        """Milliseconds between generations."""
        return 1000.0 / self.speed

    def start(self, now):
        self.running = True
        self.last_step_time = now

    def stop(self):
        self.running = False

    def toggle(self, now):
        if self.running:
            self.stop()
        else:
            self.start(now)

    def reset(self):
        """Stop, reinitialize the swarm and drop trails and frame timing."""
        self.stop()
        self.swarm.reset()
        self.swarm.clear_trails()
        self.last_frame_time = None

    def tick(self, now):
        """Process one frame at time `now` (ms). Returns True if a generation ran."""
        if not self.running:
            return False

        stepped = False
        if now - self.last_step_time >= self.step_interval:
            self.swarm.step()
            self.last_step_time = now
            stepped = True

        if self.last_frame_time is None:
            raw_delta = FIRST_FRAME_MS
        else:
            raw_delta = now - self.last_frame_time
        self.last_frame_time = now
        self.swarm.advance_time(raw_delta * self.time_scale)

        return stepped

    def run(self, frames, frame_ms=FIRST_FRAME_MS, verbose=False):
        """Drive the swarm for `frames` frames on a synthetic clock.

        Returns:
            The swarm's stats after the last frame
        """
        now = 0.0 if self.last_frame_time is None else self.last_frame_time
        self.start(now)
        for _ in range(frames):
            now += frame_ms
            if self.tick(now) and verbose:
                report(self.swarm.get_stats())
        self.stop()
        return self.swarm.get_stats()
