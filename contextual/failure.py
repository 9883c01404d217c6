"""
Categorical failures.

Testing an exception for "what kind of trouble is this?" should not mean
parsing its message, but a bare exception class can't carry the particulars
of the call site either. So: each category is a subclass of Failure, declared
once, and instances get whatever detail the call site has to offer.

	TerribleError = define("TerribleError")
	...
	raise TerribleError("frobnicating", name)
	...
	except Failure as ex:
		if ex.is_a(TerribleError): ...

Categories also work with plain ``except`` clauses, of course.
"""
from typing import Optional

class Failure(Exception):
	""" Base of all categorical failures. Not meant to be raised directly. """
	category = "Failure"
	detail: Optional[str]

	def __init_subclass__(cls, **kwargs):
		super().__init_subclass__(**kwargs)
		# A category is named for its class unless it says otherwise.
		if "category" not in cls.__dict__:
			cls.category = cls.__name__

	def __init__(self, *details: str):
		super().__init__(*details)
		self.detail = " ".join(map(str, details)) if details else None
		self._cause = None

	@property
	def cause(self) -> Optional[BaseException]:
		return self._cause

	def with_cause(self, cause: BaseException) -> "Failure":
		"""
		Associate a root cause, but only the first time.
		Later calls are ignored. Returns self, so you can say:

			raise WriteError("in write_buffer").with_cause(ex)
		"""
		if self._cause is None and cause is not None:
			self._cause = cause
			self.__cause__ = cause
		return self

	def is_a(self, category: type) -> bool:
		return isinstance(self, category)

	def __str__(self):
		text = self.category
		if self.detail is not None: text += " - " + self.detail
		if self._cause is not None: text += " (cause: %s)" % self._cause
		return text

	def __repr__(self):
		return "<%s>" % self


class Uncategorized(Failure):
	""" What type_of() makes of an exception from outside the taxonomy. It matches no category. """

	def is_a(self, category: type) -> bool:
		return False


def define(category: str) -> type[Failure]:
	""" Declare a new category. Do this once, at module level. """
	assert isinstance(category, str) and category, category
	return type(category, (Failure,), {"category": category, "__module__": __name__})

def type_of(ex: BaseException) -> Failure:
	"""
	Returns a Failure for any exception, for use like:

		if type_of(ex).is_a(IllegalArgument): ...

	A foreign exception is wrapped (as the cause) in an Uncategorized.
	"""
	if isinstance(ex, Failure): return ex
	return Uncategorized().with_cause(ex)


# The categories the scope tree raises:

class IllegalArgument(Failure, ValueError): pass
class NegativeStepCount(IllegalArgument): pass
class NilParent(Failure, ValueError): pass

class BindingFailure(Failure, KeyError):
	"""
	Trouble with a particular binding. Remembers the name and,
	where there is one, the value involved.
	"""
	name: Optional[str] = None
	value = None

	@classmethod
	def concerning(cls, name: str, value=None) -> "BindingFailure":
		ex = cls("(name: %s - value: %r)" % (name, value))
		ex.name, ex.value = name, value
		return ex

class AlreadyBound(BindingFailure): pass
class NoSuchBinding(BindingFailure): pass
