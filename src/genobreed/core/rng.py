"""Central RNG helpers using PCG64DXSM."""
from numpy.random import Generator, PCG64DXSM


def make_rng(seed: int) -> Generator:
    return Generator(PCG64DXSM(seed))


def generation_seed(seed: int, generation: int) -> int:
    """Seed for a resumed run, so generation ``n`` replays identically."""
    return (seed * 1_000_003 + generation) % 2**63
