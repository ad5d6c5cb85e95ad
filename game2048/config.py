# -*- coding: utf-8 -*-
"""
Configuration of an interactive game.
"""
import argparse
import logging
import os
from dataclasses import dataclass, field
from typing import Optional, Sequence

DEFAULT_SHARE_LINK = "https://play2048.co"


def _default_share_link() -> str:
    return os.environ.get("GAME2048_SHARE_LINK", DEFAULT_SHARE_LINK)


@dataclass
class GameConfig:
    """
    Game configuration.
    """

    seed: Optional[int] = None
    share_link: str = field(default_factory=_default_share_link)
    title: str = "2048 Game"
    log_level: str = "INFO"
    console: bool = False

    def __post_init__(self):
        if not self.share_link:
            raise ValueError("share_link must not be empty")

        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_args(cls, argv: Optional[Sequence[str]] = None) -> "GameConfig":
        """
        Build the configuration from command line arguments.

        Parameters
        ----------
        argv: Sequence[str], optional
            Arguments to parse, ``sys.argv[1:]`` when omitted

        Returns
        -------
        GameConfig
            The parsed configuration
        """
        parser = argparse.ArgumentParser(prog="game2048", description="Play 2048 with the arrow keys.")
        parser.add_argument("--seed", type=int, default=None, help="Seed for the tile spawns.")
        parser.add_argument("--share-link", default=_default_share_link(), help="Link appended to the share text.")
        parser.add_argument("--title", default=cls.title, help="Window title.")
        parser.add_argument("--log-level", default=cls.log_level, help="Logging level.")
        parser.add_argument("--console", action="store_true", help="Play in the terminal instead of a window.")
        args = parser.parse_args(argv)

        return cls(
            seed=args.seed,
            share_link=args.share_link,
            title=args.title,
            log_level=args.log_level,
            console=args.console,
        )
