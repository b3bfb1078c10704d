"""Producer subpackage: spec parsing and external producer invocation."""

from anno.producers.invoker import ProducerInvocation, run_producer, run_producers
from anno.producers.spec import ProducerSpec, parse_producer_spec

__all__ = [
    "ProducerInvocation",
    "ProducerSpec",
    "parse_producer_spec",
    "run_producer",
    "run_producers",
]
