import unittest

from formval import (
    MISSING,
    VALID,
    Invalid,
    one_of,
    required,
    valid_bool,
    valid_date_format,
    valid_date_time_format,
    valid_date_utc_format,
    valid_number,
    valid_string,
)

NON_FORMAT_VALUES = [1, [], {}, None, MISSING, True, False, "asdd-as-as", "123-11-11"]


class ValidNumberTests(unittest.TestCase):
    def setUp(self) -> None:
        self.check = valid_number("nope")

    def test_default_message(self) -> None:
        self.assertEqual(valid_number()("asd"), Invalid("asd is not of type number"))

    def test_accepts_numbers(self) -> None:
        for value in (1, -1, 0, 2.5):
            self.assertEqual(self.check(value), VALID)

    def test_rejects_non_numbers(self) -> None:
        for value in ("a", [], {}, None, MISSING, True):
            self.assertEqual(self.check(value), Invalid("nope"))


class ValidStringTests(unittest.TestCase):
    def setUp(self) -> None:
        self.check = valid_string("nope")

    def test_default_message(self) -> None:
        self.assertEqual(valid_string()(2).message, "2 is not of type string")

    def test_accepts_strings(self) -> None:
        self.assertEqual(self.check(""), VALID)
        self.assertEqual(self.check("hello"), VALID)

    def test_rejects_non_strings(self) -> None:
        for value in (1, [], {}, None, MISSING):
            self.assertEqual(self.check(value), Invalid("nope"))


class ValidBoolTests(unittest.TestCase):
    def setUp(self) -> None:
        self.check = valid_bool("nope")

    def test_default_message(self) -> None:
        self.assertEqual(valid_bool()(2).message, "2 is not of type boolean")

    def test_accepts_booleans(self) -> None:
        self.assertEqual(self.check(True), VALID)
        self.assertEqual(self.check(False), VALID)

    def test_rejects_non_booleans(self) -> None:
        for value in (1, 0, [], {}, None, MISSING):
            self.assertEqual(self.check(value), Invalid("nope"))


class DateFormatTests(unittest.TestCase):
    def test_date_default_message(self) -> None:
        self.assertEqual(valid_date_format()(2).message, "2 date format must be 'YYYY-MM-DD'")

    def test_date_accepts_pattern(self) -> None:
        check = valid_date_format("nope")
        self.assertEqual(check("2016-12-06"), VALID)
        self.assertEqual(check("1990-05-31"), VALID)

    def test_date_rejects_other_values(self) -> None:
        check = valid_date_format("nope")
        for value in NON_FORMAT_VALUES:
            self.assertEqual(check(value), Invalid("nope"), value)

    def test_date_time_default_message(self) -> None:
        self.assertEqual(
            valid_date_time_format()(2).message,
            "2 dateTime format must be 'YYYY-MM-DD hh:mm:ss'",
        )

    def test_date_time_accepts_pattern(self) -> None:
        check = valid_date_time_format("nope")
        self.assertEqual(check("2016-12-06 22:12:00"), VALID)
        self.assertEqual(check("1990-05-31 10:09:10"), VALID)

    def test_date_time_rejects_other_values(self) -> None:
        check = valid_date_time_format("nope")
        for value in NON_FORMAT_VALUES + ["2016-12-06T22:12:00Z"]:
            self.assertEqual(check(value), Invalid("nope"), value)

    def test_date_utc_default_message(self) -> None:
        self.assertEqual(
            valid_date_utc_format()(2).message,
            "2 date format must be UTC: 'YYYY-MM-DDThh:mm:ssZ'",
        )

    def test_date_utc_accepts_pattern(self) -> None:
        check = valid_date_utc_format("nope")
        self.assertEqual(check("2016-12-06T22:12:00Z"), VALID)
        self.assertEqual(check("1990-05-31T10:09:10Z"), VALID)

    def test_date_utc_rejects_other_values(self) -> None:
        check = valid_date_utc_format("nope")
        for value in NON_FORMAT_VALUES + ["2016-12-06 22:12:00"]:
            self.assertEqual(check(value), Invalid("nope"), value)


class OneOfTests(unittest.TestCase):
    def setUp(self) -> None:
        self.check = one_of(["single", "family"], "nope")

    def test_default_message(self) -> None:
        self.assertEqual(
            one_of(["single", "family"])("a").message,
            "'a' is not one of: 'single', 'family'",
        )

    def test_accepts_members(self) -> None:
        self.assertEqual(self.check("single"), VALID)
        self.assertEqual(self.check("family"), VALID)

    def test_rejects_non_members(self) -> None:
        for value in NON_FORMAT_VALUES + ["2016-12-06 22:12:00"]:
            self.assertEqual(self.check(value), Invalid("nope"), value)

    def test_uses_strict_equality(self) -> None:
        self.assertFalse(one_of([1])(True))
        self.assertFalse(one_of([True])(1))
        self.assertFalse(one_of([[]])([]))
        self.assertTrue(one_of([1])(1.0))
        shared: list = []
        self.assertTrue(one_of([shared])(shared))

    def test_allowed_values_are_copied(self) -> None:
        allowed = ["a"]
        check = one_of(allowed)
        allowed.append("b")
        self.assertFalse(check("b"))


class RequiredTests(unittest.TestCase):
    def setUp(self) -> None:
        self.check = required("nope")

    def test_default_message_ignores_value(self) -> None:
        self.assertEqual(required()("").message, "A non empty value is required")
        self.assertEqual(required()(None).message, "A non empty value is required")

    def test_accepts_present_values(self) -> None:
        for value in ("single", "family", 1, 0, True, False, ["x"], {"k": 1}):
            self.assertEqual(self.check(value), VALID, value)

    def test_rejects_empty_values(self) -> None:
        for value in ("", [], {}, (), None, MISSING):
            self.assertEqual(self.check(value), Invalid("nope"), value)


class FactoryContractTests(unittest.TestCase):
    def test_empty_override_is_rejected(self) -> None:
        for factory in (valid_string, valid_number, required):
            with self.assertRaises(ValueError):
                factory("")
        with self.assertRaises(ValueError):
            one_of(["a"], "")

    def test_results_are_valid_or_non_empty_messages(self) -> None:
        factories = [
            valid_string(),
            valid_number(),
            valid_bool(),
            valid_date_format(),
            valid_date_time_format(),
            valid_date_utc_format(),
            one_of(["a"]),
            required(),
        ]
        for validator in factories:
            for value in ("", "a", 0, None, MISSING, [], {}, True):
                outcome = validator(value)
                if outcome == VALID:
                    continue
                self.assertIsInstance(outcome, Invalid)
                self.assertIsInstance(outcome.message, str)
                self.assertTrue(outcome.message)
                self.assertEqual(validator(value), outcome)


if __name__ == "__main__":
    unittest.main()
