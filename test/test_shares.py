import json
import os
import tempfile
import unittest

from shares import Share, shares_from_input, load_shares
from utils import InvalidDigitError, MissingShareError, ShareFormatError


def document(k, records, n=None):
    data = {"keys": {"n": n if n is not None else len(records), "k": k}}
    for i, (base, value) in records.items():
        data[str(i)] = {"base": str(base), "value": value}
    return data


class SharesFromInputTests(unittest.TestCase):
    def test_decodes_first_k(self):
        data = document(3, {1: (10, "4"), 2: (2, "111"), 3: (16, "a"), 4: (10, "13")})
        shares = shares_from_input(data)
        self.assertEqual(shares, [Share(1, 4), Share(2, 7), Share(3, 10)])

    def test_share_unpacks(self):
        x, y = Share(2, 7)
        self.assertEqual((x, y), (2, 7))

    def test_numeric_fields(self):
        data = {"keys": {"n": 2, "k": 2}, "1": {"base": 10, "value": "4"}, "2": {"base": 10, "value": "7"}}
        self.assertEqual([tuple(s) for s in shares_from_input(data)], [(1, 4), (2, 7)])

    def test_missing_identifier(self):
        data = document(3, {1: (10, "4"), 3: (10, "12"), 4: (10, "19")})
        with self.assertRaises(MissingShareError) as cm:
            shares_from_input(data)
        self.assertIn("2", cm.exception.message)

    def test_too_few_records(self):
        data = document(3, {1: (10, "4"), 2: (10, "7")})
        with self.assertRaises(MissingShareError):
            shares_from_input(data)

    def test_select(self):
        data = document(2, {1: (10, "4"), 2: (10, "7"), 5: (10, "16")})
        shares = shares_from_input(data, select=[5, 1])
        self.assertEqual(shares, [Share(5, 16), Share(1, 4)])

    def test_select_too_few(self):
        data = document(3, {1: (10, "4"), 2: (10, "7"), 3: (10, "10")})
        with self.assertRaises(MissingShareError):
            shares_from_input(data, select=[1, 2])

    def test_select_absent(self):
        data = document(2, {1: (10, "4"), 2: (10, "7")})
        with self.assertRaises(MissingShareError):
            shares_from_input(data, select=[1, 9])

    def test_select_duplicates(self):
        data = document(2, {1: (10, "4"), 2: (10, "7")})
        with self.assertRaises(ShareFormatError):
            shares_from_input(data, select=[1, 1])

    def test_invalid_digit(self):
        data = document(2, {1: (10, "4"), 2: (8, "9")})
        with self.assertRaises(InvalidDigitError):
            shares_from_input(data)

    def test_missing_threshold(self):
        with self.assertRaises(ShareFormatError):
            shares_from_input({"1": {"base": "10", "value": "4"}})
        with self.assertRaises(ShareFormatError):
            shares_from_input({"keys": {"n": 1, "k": 0}})
        with self.assertRaises(ShareFormatError):
            shares_from_input({"keys": {"k": "three"}})

    def test_malformed_record(self):
        with self.assertRaises(ShareFormatError):
            shares_from_input({"keys": {"k": 1}, "1": {"value": "4"}})
        with self.assertRaises(ShareFormatError):
            shares_from_input({"keys": {"k": 1}, "1": {"base": "10", "value": 4}})
        with self.assertRaises(ShareFormatError):
            shares_from_input({"keys": {"k": 1}, "1": "4"})

    def test_huge_threshold_reports_first_gap(self):
        data = {"keys": {"k": 10**19}, "1": {"base": "10", "value": "4"}}
        with self.assertRaises(MissingShareError) as cm:
            shares_from_input(data)
        self.assertIn("number 2", cm.exception.message)

    def test_select_ignores_shares_past_k(self):
        data = document(2, {1: (10, "4"), 2: (10, "7"), 3: (2, "9")})
        shares = shares_from_input(data, select=[1, 2, 3])
        self.assertEqual(shares, [Share(1, 4), Share(2, 7)])

    def test_non_canonical_keys_do_not_collide(self):
        data = {"keys": {"k": 1}, "1": {"base": "10", "value": "4"}, "01": {"base": "10", "value": "9"}}
        self.assertEqual(shares_from_input(data), [Share(1, 4)])
        data = {"keys": {"k": 1}, "\u0661": {"base": "10", "value": "9"}, "1": {"base": "10", "value": "4"}}
        self.assertEqual(shares_from_input(data), [Share(1, 4)])
        data = {"keys": {"k": 1}, "01": {"base": "10", "value": "9"}}
        with self.assertRaises(MissingShareError):
            shares_from_input(data)

    def test_non_ascii_numbers_rejected(self):
        with self.assertRaises(ShareFormatError):
            shares_from_input({"keys": {"k": "\u0661"}, "1": {"base": "10", "value": "4"}})
        with self.assertRaises(ShareFormatError):
            shares_from_input({"keys": {"k": 1}, "1": {"base": "\u0661\u0660", "value": "4"}})

    def test_not_an_object(self):
        with self.assertRaises(ShareFormatError):
            shares_from_input([1, 2, 3])


class LoadSharesTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def write(self, name, text):
        path = os.path.join(self.tmp.name, name)
        with open(path, "w") as f:
            f.write(text)
        return path

    def test_load(self):
        path = self.write("in.json", json.dumps(document(2, {1: (10, "4"), 2: (10, "7")})))
        k, shares = load_shares(path)
        self.assertEqual(k, 2)
        self.assertEqual(shares, [Share(1, 4), Share(2, 7)])

    def test_load_utf8(self):
        data = document(1, {1: (10, "4")})
        data["note"] = "caf\u00e9 \u79d8\u5bc6"
        path = os.path.join(self.tmp.name, "utf8.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False)
        k, shares = load_shares(path)
        self.assertEqual((k, shares), (1, [Share(1, 4)]))

    def test_bad_json(self):
        path = self.write("bad.json", "{not json")
        with self.assertRaises(ShareFormatError):
            load_shares(path)

    def test_missing_file(self):
        with self.assertRaises(OSError):
            load_shares(os.path.join(self.tmp.name, "absent.json"))


if __name__ == "__main__":
    unittest.main()
