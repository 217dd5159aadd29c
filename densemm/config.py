"""
Defaults for densemm tooling.

The library itself takes everything as explicit arguments; these values
only seed the benchmark CLI.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from densemm.errors import InvalidArgument


DEFAULT_TILE_SIZE = 32
DEFAULT_BENCH_SIZE = 256
DEFAULT_BENCH_TILES = [16, 32, 64]
DEFAULT_REPEAT = 3
DEFAULT_SEED = 0


@dataclass
class BenchConfig:
    """Parameters for one benchmark run."""
    size: int = DEFAULT_BENCH_SIZE
    tiles: List[int] = field(default_factory=lambda: list(DEFAULT_BENCH_TILES))
    repeat: int = DEFAULT_REPEAT
    seed: int = DEFAULT_SEED
    skip_naive: bool = False
    output: Optional[str] = None
    verbose: bool = False

    def __post_init__(self):
        if self.size <= 0:
            raise InvalidArgument(f"matrix size must be positive, got {self.size}")
        if self.repeat <= 0:
            raise InvalidArgument(f"repeat count must be positive, got {self.repeat}")
        if not self.tiles:
            raise InvalidArgument("at least one tile size is required")
        for t in self.tiles:
            if t <= 0:
                raise InvalidArgument(f"tile size must be positive, got {t}")

    @classmethod
    def from_args(cls, args) -> "BenchConfig":
        """Build from an argparse namespace produced by densemm.cli."""
        return cls(
            size=args.size,
            tiles=list(args.tile) if args.tile else list(DEFAULT_BENCH_TILES),
            repeat=args.repeat,
            seed=args.seed,
            skip_naive=args.skip_naive,
            output=args.output,
            verbose=args.verbose,
        )
