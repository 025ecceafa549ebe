"""Declaration layer: builders, option parsing, accessor injection, initialization.

Architecture::

    option_parser.py      OptionParser (keyword aliases → Attribute options)
    attribute_builder.py  AttributeBuilder, argument(), option()
    method_injector.py    AttributeAccessor, MethodInjector, assign()
    initializer.py        Initializer (constructor arguments → pipeline)
"""

from attributer.dsl.attribute_builder import AttributeBuilder, argument, option
from attributer.dsl.initializer import Initializer
from attributer.dsl.method_injector import AttributeAccessor, MethodInjector, assign
from attributer.dsl.option_parser import OptionParser

__all__ = [
    "AttributeAccessor",
    "AttributeBuilder",
    "Initializer",
    "MethodInjector",
    "OptionParser",
    "argument",
    "assign",
    "option",
]
