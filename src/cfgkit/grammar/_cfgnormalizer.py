from __future__ import annotations
import time
from typing import TYPE_CHECKING, Callable

from cfgkit.logging import Logger

if TYPE_CHECKING:
    from cfgkit.grammar._cfg import ContextFreeGrammar

class CFGNormalizer():
    """
    Converts a context free grammar into a CNF grammar, in place.
    """

    # the order matters: every pass after the first assumes no long rules, and
    # the removal of useless rules must see the result of chain removal
    passes = [
        "remove_long_rules",
        "remove_empty_rules",
        "remove_chain_rules",
        "remove_non_generating_rules",
        "remove_non_reachable_rules",
        "remove_mixed_rules",
    ]

    def __init__(self, debug: bool = False):
        self.debug = debug
        self.logger = Logger.for_component(file="normalizer", tag=type(self).__name__, debug=debug)

    def run(self, cfg: ContextFreeGrammar) -> ContextFreeGrammar:
        start = time.perf_counter_ns()
        n_rules_before = len(cfg.rules)
        self.logger.log_debug("#" * 20 + " Normalizing " + "#" * 20)
        if self.debug:
            self.logger.log_debug("input grammar:\n" + str(cfg))

        for name in CFGNormalizer.passes:
            self._run_pass(name, getattr(cfg, name), cfg)

        end = time.perf_counter_ns()
        self.logger.log(
            f"normalized {n_rules_before} rules into {len(cfg.rules)} "
            + f"in {round((end - start) / 1000000, 5)}ms")
        return cfg

    def _run_pass(self, name: str, f: Callable[[], None], cfg: ContextFreeGrammar) -> None:
        f()
        self.logger.log_debug(f"{name}: {len(cfg.rules)} rules, start symbol {cfg.start_symbol!r}")
        if self.debug:
            self.logger.log_debug(str(cfg))
