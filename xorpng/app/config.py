from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass
from typing import Optional


class Mode(enum.Enum):
    GENERATE = "generate"
    XOR = "xor"


@dataclass(frozen=True)
class CliConfig:
    image1: str = ""
    image2: str = ""
    gen_size: int = 0
    count: int = 1
    verbose: bool = False

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> "CliConfig":
        return cls(
            image1=args.image1 or "",
            image2=args.image2 or "",
            gen_size=args.gen_size,
            count=args.count,
            verbose=args.verbose,
        )

    @property
    def mode(self) -> Optional[Mode]:
        if self.gen_size > 0:
            return Mode.GENERATE
        if self.image1 and self.image2:
            return Mode.XOR
        return None
