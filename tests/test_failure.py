import unittest

from contextual.failure import (
	Failure, Uncategorized, define, type_of,
	IllegalArgument, NegativeStepCount, NilParent, AlreadyBound, NoSuchBinding,
)

Fubar = define("fubar")
IllegalState = define("IllegalState")

class DefineTests(unittest.TestCase):

	def test_bare_instance(self):
		ex = Fubar()
		self.assertIsInstance(ex, Failure)
		self.assertTrue(ex.is_a(Fubar))
		self.assertIsNone(ex.detail)
		self.assertEqual("fubar", str(ex))

	def test_detail_fragments_are_joined(self):
		ex = Fubar("did", "it", "again!")
		self.assertEqual("did it again!", ex.detail)
		self.assertEqual("fubar - did it again!", str(ex))

	def test_categories_are_distinct(self):
		self.assertFalse(Fubar("x").is_a(IllegalState))
		self.assertFalse(IllegalState().is_a(Fubar))

	def test_matching_ignores_message_text(self):
		# Same leading text, different category.
		FubarToo = define("fubar - not really")
		self.assertFalse(FubarToo().is_a(Fubar))
		self.assertFalse(Fubar("not really").is_a(FubarToo))

	def test_usable_in_except_clause(self):
		with self.assertRaises(Fubar) as caught:
			raise Fubar("here")
		self.assertEqual("here", caught.exception.detail)


class TypeOfTests(unittest.TestCase):

	def test_failures_pass_through(self):
		ex = IllegalArgument("name")
		self.assertIs(ex, type_of(ex))

	def test_foreign_exceptions_match_nothing(self):
		for foreign in [RuntimeError("generic"), ValueError("fubar - spoO")]:
			with self.subTest(foreign):
				view = type_of(foreign)
				self.assertIsInstance(view, Uncategorized)
				self.assertFalse(view.is_a(Fubar))
				self.assertFalse(view.is_a(Uncategorized))
				self.assertIs(foreign, view.cause)


class CauseTests(unittest.TestCase):

	def test_cause_is_rendered(self):
		root_cause = RuntimeError("unauthorized")
		ex = Fubar("in write_buffer").with_cause(root_cause)
		self.assertIs(root_cause, ex.cause)
		self.assertIs(root_cause, ex.__cause__)
		self.assertEqual("fubar - in write_buffer (cause: unauthorized)", str(ex))

	def test_cause_without_detail(self):
		ex = IllegalState().with_cause(Fubar("deep"))
		self.assertEqual("IllegalState (cause: fubar - deep)", str(ex))

	def test_second_cause_is_ignored(self):
		first, second = RuntimeError("first"), RuntimeError("second")
		ex = Fubar()
		self.assertIs(ex, ex.with_cause(first))
		self.assertIs(ex, ex.with_cause(second))
		self.assertIs(first, ex.cause)
		self.assertNotIn("second", str(ex))

	def test_no_cause_by_default(self):
		self.assertIsNone(Fubar().cause)


class CoreCategoryTests(unittest.TestCase):

	def test_names(self):
		for category in [IllegalArgument, NegativeStepCount, NilParent, AlreadyBound, NoSuchBinding]:
			with self.subTest(category):
				self.assertEqual(category.__name__, str(category()))

	def test_negative_step_count_is_an_illegal_argument(self):
		ex = NegativeStepCount("-1")
		self.assertTrue(ex.is_a(IllegalArgument))
		self.assertTrue(ex.is_a(NegativeStepCount))
		self.assertFalse(IllegalArgument().is_a(NegativeStepCount))

	def test_builtin_families(self):
		self.assertIsInstance(IllegalArgument(), ValueError)
		self.assertIsInstance(NilParent(), ValueError)
		self.assertIsInstance(AlreadyBound(), KeyError)
		self.assertIsInstance(NoSuchBinding(), KeyError)

	def test_binding_failures_remember_particulars(self):
		ex = AlreadyBound.concerning("woof", "snowy")
		self.assertEqual("woof", ex.name)
		self.assertEqual("snowy", ex.value)
		self.assertEqual("AlreadyBound - (name: woof - value: 'snowy')", str(ex))
		ex = NoSuchBinding.concerning("woof")
		self.assertIsNone(ex.value)
		self.assertEqual("NoSuchBinding - (name: woof - value: None)", str(ex))


if __name__ == '__main__':
	unittest.main()
