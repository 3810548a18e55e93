import math
import unittest
import sys
from pathlib import Path

import pandas as pd

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from calc import ExpressionEvaluator
from rpn import InvalidToken, MalformedExpression


class TestExpressionEvaluator(unittest.TestCase):
    def setUp(self):
        self.evaluator = ExpressionEvaluator(cache_size=2)

    def test_evaluate_infix_string_and_list(self):
        self.assertEqual(self.evaluator.evaluate("2 + 3 × 4"), 14.0)
        self.assertEqual(self.evaluator.evaluate(["(", "2", "+", "3", ")", "×", "4"]), 20.0)

    def test_evaluate_postfix(self):
        self.assertEqual(self.evaluator.evaluate("3 2 - 1 +", notation="postfix"), 2.0)
        with self.assertRaises(MalformedExpression):
            self.evaluator.evaluate("3 4", notation="postfix")

    def test_unknown_token_and_notation(self):
        with self.assertRaises(InvalidToken):
            self.evaluator.evaluate("2 ^ 3")
        with self.assertRaises(ValueError):
            self.evaluator.evaluate("2 + 3", notation="prefix")

    def test_to_postfix(self):
        self.assertEqual(self.evaluator.to_postfix("3 - 2 + 1"), "3 2 - 1 +")
        self.assertEqual(self.evaluator.to_postfix(["2", "+", "3", "×", "4"]), "2 3 4 × +")

    def test_cache(self):
        self.evaluator.evaluate("1 + 1")
        self.evaluator.evaluate("1 + 1")
        self.assertEqual(self.evaluator.cache_info(), {'hits': 1, 'misses': 1, 'size': 1})

        self.evaluator.evaluate("1 + 2")
        self.evaluator.evaluate("1 + 3")
        self.assertEqual(self.evaluator.cache_info()['size'], 2)

        self.evaluator.clear_cache()
        self.assertEqual(self.evaluator.cache_info(), {'hits': 0, 'misses': 0, 'size': 0})

    def test_cache_separates_notations(self):
        self.assertEqual(self.evaluator.evaluate("4", notation="infix"), 4.0)
        self.assertEqual(self.evaluator.evaluate("4", notation="postfix"), 4.0)
        self.assertEqual(self.evaluator.cache_info()['misses'], 2)

    def test_evaluate_batch(self):
        results = self.evaluator.evaluate_batch(["1 + 2", "10 ÷ 0", ["5", "+"], "2 abc"])
        self.assertIsInstance(results, pd.Series)
        self.assertEqual(list(results.index), ["1 + 2", "10 ÷ 0", "5 +", "2 abc"])
        self.assertEqual(results["1 + 2"], 3.0)
        self.assertEqual(results["10 ÷ 0"], math.inf)
        self.assertTrue(math.isnan(results["5 +"]))
        self.assertTrue(math.isnan(results["2 abc"]))

    def test_batch_labels_are_canonical(self):
        results = self.evaluator.evaluate_batch(["2.50 + +1", ["2.5", "+", "1"], "007 × 2"])
        self.assertEqual(list(results.index), ["2.5 + 1", "2.5 + 1", "7 × 2"])
        self.assertEqual(list(results.values), [3.5, 3.5, 14.0])

    def test_postfix_rendering_reads_back(self):
        for formula in ["0.00001 + 1", "100000000000000000000 + 1",
                        "0.0000000000015 × 2", "1 ÷ -0"]:
            rendered = self.evaluator.to_postfix(formula)
            self.assertEqual(
                self.evaluator.evaluate(rendered, notation="postfix"),
                self.evaluator.evaluate(formula),
                formula,
            )
        self.assertEqual(self.evaluator.to_postfix("0.00001 + 1"), "0.00001 1 +")

    def test_zero_cache_size_disables_cache(self):
        evaluator = ExpressionEvaluator(cache_size=0)
        self.assertEqual(evaluator.cache_size, 0)
        evaluator.evaluate("1 + 1")
        evaluator.evaluate("1 + 1")
        self.assertEqual(evaluator.cache_info(), {'hits': 0, 'misses': 2, 'size': 0})
        self.assertEqual(ExpressionEvaluator().cache_size, 1000)


if __name__ == "__main__":
    unittest.main()
