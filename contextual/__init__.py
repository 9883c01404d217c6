"""
A hierarchical namespace of string names and untyped values.
"""
from .failure import (
	Failure, Uncategorized, define, type_of,
	IllegalArgument, NegativeStepCount, NilParent,
	BindingFailure, AlreadyBound, NoSuchBinding,
)
from .scope import Scope, root, child_of
from .component import Contextual, Component, Container, AlreadyScoped, AlreadyContained, NotContained
