"""Attribute descriptor and the four policies it owns.

Architecture::

    attribute.py     Attribute (identity + pipeline orchestration)
    signature.py     Signature, AttributeKind, Visibility
    coercer.py       Coercer (fail-fast transformation chain)
    validator.py     Validator (requiredness, nilability, aggregate checks)
    callback.py      Callback (change observers)
    handlers.py      Handler tagged union, MethodReference
    mixin.py         BelongsToAttribute
"""

from attributer.attribute.attribute import Attribute
from attributer.attribute.callback import Callback
from attributer.attribute.coercer import Coercer
from attributer.attribute.handlers import Handler, HandlerKind, MethodReference
from attributer.attribute.signature import AttributeKind, Signature, Visibility
from attributer.attribute.validator import Validator

__all__ = [
    "Attribute",
    "AttributeKind",
    "Callback",
    "Coercer",
    "Handler",
    "HandlerKind",
    "MethodReference",
    "Signature",
    "Validator",
    "Visibility",
]
