"""Rules for the JavaScript/TypeScript family."""

from siskel.rules.javascript.debug_logging import DebugLoggingRule
from siskel.rules.javascript.dom_sinks import DangerousDomSinkRule
from siskel.rules.javascript.nested_loops import NestedLoopRule, has_nested_loop
from siskel.rules.javascript.null_access import NullAccessRule
from siskel.rules.javascript.promise_chain import PromiseChainRule
from siskel.rules.javascript.sql_concat import SqlConcatenationRule

__all__ = [
  "DangerousDomSinkRule",
  "DebugLoggingRule",
  "NestedLoopRule",
  "NullAccessRule",
  "PromiseChainRule",
  "SqlConcatenationRule",
  "has_nested_loop",
]
