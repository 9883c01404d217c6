"""
Hierarchical name-spaces with a mutable layer at every level.

A scope sees its own bindings and, failing those, whatever its ancestors
expose. Binding in a child shadows the same name further up without
disturbing it. Children never change parents, so the ancestor chain of any
scope is fixed the moment it exists.

Each scope keeps its layer in a booze-tools NameSpace chained to the
parent's, which gives duplicate detection and the full-depth search for free.
The depth-limited search walks the chain here.
"""
import logging
from threading import RLock
from typing import Any, Iterator, Optional

from boozetools.support.symtab import NameSpace, NoSuchSymbol, SymbolAlreadyExists

from .failure import IllegalArgument, NegativeStepCount, NilParent, AlreadyBound, NoSuchBinding

log = logging.getLogger(__name__)

def _check_name(name):
	if not isinstance(name, str) or not name:
		raise IllegalArgument("name must be a non-empty string, not", repr(name))

class Scope:
	"""
	Use root() and child_of() (or Scope.child) to make these.
	Values may be anything except None, which means "not bound".
	"""
	_parent: Optional["Scope"]
	_symbols: NameSpace

	def __init__(self, parent: Optional["Scope"] = None):
		assert parent is None or isinstance(parent, Scope), type(parent)
		self._parent = parent
		if parent is None:
			# One lock per tree, shared by every descendant.
			self._lock = RLock()
			self._symbols = NameSpace(place=self)
		else:
			self._lock = parent._lock
			self._symbols = parent._symbols.new_child(self)

	def __repr__(self):
		return "<Scope depth=%d local=%d>" % (self.depth(), len(self._symbols.local))

	@property
	def parent(self) -> Optional["Scope"]:
		return self._parent

	def child(self) -> "Scope":
		return child_of(self)

	def _chain(self) -> Iterator["Scope"]:
		""" This scope, then each ancestor in turn. """
		scope = self
		while scope is not None:
			yield scope
			scope = scope._parent

	def is_root(self) -> bool:
		return self._parent is None

	def depth(self) -> int:
		""" Number of hops to the root. """
		with self._lock:
			return sum(1 for _ in self._chain()) - 1

	def size(self) -> int:
		"""
		Count of bindings visible from here, shadowed ones included.
		Like is_empty(), this is relative: siblings may disagree.
		"""
		with self._lock:
			return sum(len(scope._symbols.local) for scope in self._chain())

	def is_empty(self) -> bool:
		return self.size() == 0

	def lookup(self, name: str) -> Any:
		"""
		The nearest value bound to name, searching here first and then
		each ancestor up to the root. None if there is no such binding.
		"""
		_check_name(name)
		with self._lock:
			try: return self._symbols[name]
			except NoSuchSymbol:
				log.debug("lookup(%r) found nothing from %r", name, self)
				return None

	def lookup_n(self, name: str, n: int) -> Any:
		"""
		Like lookup(), but give up after n steps up the hierarchy.
		With n == 0, only this scope is consulted.
		"""
		_check_name(name)
		if not isinstance(n, int): raise IllegalArgument("step count must be an int, not", repr(n))
		if n < 0: raise NegativeStepCount("step count", str(n))
		with self._lock:
			for scope in self._chain():
				local = scope._symbols.local
				if name in local: return local[name]
				if n == 0: break
				n -= 1
		log.debug("lookup_n(%r) found nothing within reach of %r", name, self)
		return None

	def bind(self, name: str, value: Any):
		"""
		Bind value to name in this scope. Bindings in ancestors do not
		interfere; a local binding already present does: use rebind().
		"""
		_check_name(name)
		if value is None: raise IllegalArgument("cannot bind None to", repr(name))
		with self._lock:
			try: self._symbols[name] = value
			except SymbolAlreadyExists:
				raise AlreadyBound.concerning(name, self._symbols.local[name])
		log.debug("bound %r in %r", name, self)

	def unbind(self, name: str) -> Any:
		"""
		Remove and return the local binding for name.
		Only sees what lookup_n(name, 0) would see.
		"""
		_check_name(name)
		with self._lock:
			try: value = self._symbols.local.pop(name)
			except KeyError: raise NoSuchBinding.concerning(name)
		log.debug("unbound %r in %r", name, self)
		return value

	def rebind(self, name: str, value: Any) -> Any:
		"""
		Exactly unbind() followed by bind(). Returns the old value.

		If the bind half fails, the old binding is gone all the same. The
		failure then carries the old value in its ``unbound`` attribute.
		"""
		with self._lock:
			old = self.unbind(name)
			try: self.bind(name, value)
			except IllegalArgument as ex:
				ex.unbound = old
				raise
		return old


def root() -> Scope:
	return Scope()

def child_of(parent: Optional[Scope]) -> Scope:
	if parent is None: raise NilParent("cannot make a child of nothing")
	with parent._lock:
		return Scope(parent)
