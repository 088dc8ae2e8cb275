"""
Complexity classification for FPA components, including the static complexity matrices and function point tables, the two-axis classifier, and the dual-perspective external query strategies.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.complexity.classifier import Classification, classify, combine
from engine.complexity.dual import classify_query_dual, register_strategy
from engine.complexity.validation import ValidationReport, validate_component

__all__ = [
    "Classification",
    "classify",
    "combine",
    "classify_query_dual",
    "register_strategy",
    "ValidationReport",
    "validate_component",
]
