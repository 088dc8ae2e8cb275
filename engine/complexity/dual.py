"""
Dual-perspective evaluation of external queries. A query can be described by the files and data elements on its input side and on its output side; the rule that merges the two sides is a named strategy so it can be swapped without changing the classifier.

Strategies:

* ``max_side`` classifies each side with the standard external query matrix
  and keeps the side with the higher complexity level (the input side wins a
  tie).
* ``reject`` refuses to evaluate four-input queries and raises
  :class:`UnsupportedStrategy`; use it where the merge rule has not been
  agreed with the product owners.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from config import EQ_DUAL_STRATEGY_MAX_SIDE, EQ_DUAL_STRATEGY_REJECT
from engine.complexity.classifier import Classification, classify
from engine.enums import ComponentKind
from engine.exceptions import UnsupportedStrategy

log = logging.getLogger(__name__)

DualStrategy = Callable[[Classification, Classification], Classification]

_STRATEGIES: Dict[str, DualStrategy] = {}


def register_strategy(name: str) -> Callable[[DualStrategy], DualStrategy]:
    def decorator(func: DualStrategy) -> DualStrategy:
        _STRATEGIES[name] = func
        return func
    return decorator


def available_strategies() -> list[str]:
    return sorted(_STRATEGIES)


@register_strategy(EQ_DUAL_STRATEGY_MAX_SIDE)
def _max_side(input_side: Classification, output_side: Classification) -> Classification:
    if output_side.complexity.weight() > input_side.complexity.weight():
        return output_side
    return input_side


@register_strategy(EQ_DUAL_STRATEGY_REJECT)
def _reject(input_side: Classification, output_side: Classification) -> Classification:
    raise UnsupportedStrategy(
        "dual-perspective external query evaluation is disabled; "
        "classify the query with its standard two counts instead"
    )


def classify_query_dual(
    input_ftr: int,
    input_det: int,
    output_ftr: int,
    output_det: int,
    strategy: Optional[str] = None,
) -> Classification:
    if strategy is None:
        from config import settings
        strategy = settings.eq_dual_strategy

    merge = _STRATEGIES.get(strategy)
    if merge is None:
        raise UnsupportedStrategy(
            f"unknown dual query strategy {strategy!r}; available: {', '.join(available_strategies())}"
        )

    input_side = classify(ComponentKind.EQ, input_ftr, input_det)
    output_side = classify(ComponentKind.EQ, output_ftr, output_det)
    result = merge(input_side, output_side)
    log.debug(
        "classify_query_dual strategy=%s input=%s output=%s -> %s",
        strategy, input_side.complexity.value, output_side.complexity.value, result.complexity.value,
    )
    return result
