"""
Things that carry a scope around for their operational context.

The scope tree prescribes nothing about what a component does with the
bindings it can reach; these classes only hold the reference.
"""
from typing import Iterator, Optional

from .failure import define, IllegalArgument
from .scope import Scope, child_of

AlreadyScoped = define("AlreadyScoped")
AlreadyContained = define("AlreadyContained")
NotContained = define("NotContained")

class Contextual:
	""" Mixin: exactly one scope, settable exactly once. """
	scope: Optional[Scope] = None

	def set_scope(self, scope: Scope):
		if scope is None: raise IllegalArgument("scope is None")
		if self.scope is not None: raise AlreadyScoped(repr(self))
		assert isinstance(scope, Scope), type(scope)
		self.scope = scope

class Component(Contextual):
	pass

class Container(Component):
	"""
	A component made of other components. Once the container has a scope,
	any member lacking one gets a fresh child of it.
	"""
	def __init__(self):
		self._members = []

	def __iter__(self) -> Iterator[Component]:
		return iter(self._members)

	def __len__(self):
		return len(self._members)

	def __contains__(self, item):
		return any(m is item for m in self._members)

	def set_scope(self, scope: Scope):
		super().set_scope(scope)
		for member in self._members: self._adopt(member)

	def _adopt(self, member: Component):
		if self.scope is not None and member.scope is None:
			member.set_scope(child_of(self.scope))

	def add(self, member: Component):
		if member is None: raise IllegalArgument("member is None")
		if member in self: raise AlreadyContained(repr(member))
		assert isinstance(member, Contextual), type(member)
		self._members.append(member)
		self._adopt(member)

	def remove(self, member: Component):
		for i, m in enumerate(self._members):
			if m is member:
				del self._members[i]
				return
		raise NotContained(repr(member))
