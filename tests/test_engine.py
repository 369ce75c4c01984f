#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Unit tests for the case-preserving substitution engine and its casing helpers.

• Casing helpers: ASCII-only letter model, copy-case, overflow reference.
• Engine: no-op laws, single-pass scanning, predicate contract, case synthesis.
"""
from __future__ import annotations

import itertools
import sys
import unittest
from pathlib import Path
from typing import List

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from uwuify.core.models import MatchContext  # noqa: E402
from uwuify.processing.casing import (  # noqa: E402
    ascii_lower,
    copy_case,
    is_letter,
    is_upper,
    overflow_reference,
    synthesize_case,
)
from uwuify.processing.replace import CaseKeepingReplacer, replace_keep_case  # noqa: E402


# --------------------------------------------------------------------------- #
#  1. Casing helpers                                                          #
# --------------------------------------------------------------------------- #
class CasingHelperTests(unittest.TestCase):
    def test_letters_are_ascii_only(self) -> None:
        for ch in "aZmQ":
            self.assertTrue(is_letter(ch))
        for ch in ("1", "@", "[", "`", " ", "é", "ß", None):
            self.assertFalse(is_letter(ch), ch)

    def test_is_upper(self) -> None:
        self.assertTrue(is_upper("Q"))
        self.assertFalse(is_upper("q"))
        self.assertFalse(is_upper("@"))
        self.assertFalse(is_upper("É"))
        self.assertFalse(is_upper(None))

    def test_ascii_lower_leaves_other_characters(self) -> None:
        self.assertEqual(ascii_lower("HeLLo, ÉCOLE 42"), "hello, École 42")

    def test_copy_case(self) -> None:
        self.assertEqual(copy_case("A", "b"), "B")
        self.assertEqual(copy_case("a", "B"), "b")
        self.assertEqual(copy_case("+", "X"), "x")
        self.assertEqual(copy_case("A", "<"), "<")
        self.assertEqual(copy_case("a", "3"), "3")

    def test_overflow_reference_prefers_following_letter(self) -> None:
        self.assertEqual(overflow_reference("upTo", "up", 0), "T")
        self.assertEqual(overflow_reference("UPto", "UP", 0), "t")

    def test_overflow_reference_falls_back_to_last_matched(self) -> None:
        self.assertEqual(overflow_reference("uP to", "uP", 0), "P")
        self.assertEqual(overflow_reference("Up", "Up", 0), "p")
        self.assertEqual(overflow_reference("xUP", "UP", 1), "P")

    def test_synthesize_same_length_is_positional(self) -> None:
        self.assertEqual(synthesize_case("ThE", "abc", "x"), "AbC")

    def test_synthesize_shorter_replacement_drops_extra_case(self) -> None:
        self.assertEqual(synthesize_case("HaVe", "haf", "x"), "HaF")
        self.assertEqual(synthesize_case("HAVE", "haf", "x"), "HAF")

    def test_synthesize_overflow_reuses_single_reference(self) -> None:
        self.assertEqual(synthesize_case("Up", "uwp", "x"), "Uwp")
        self.assertEqual(synthesize_case("up", "uwppp", "X"), "uwPPP")
        self.assertEqual(synthesize_case("UP", "uwppp", "x"), "UWppp")


# --------------------------------------------------------------------------- #
#  2. Engine                                                                  #
# --------------------------------------------------------------------------- #
class ReplaceNoOpTests(unittest.TestCase):
    def test_empty_pattern_is_identity(self) -> None:
        for text, repl in itertools.product(["", "a", "Hello World", "..."], ["", "x", "long one"]):
            self.assertEqual(replace_keep_case(text, "", repl), text)

    def test_empty_text_yields_empty(self) -> None:
        for pattern in ["a", "hello", "c++"]:
            self.assertEqual(replace_keep_case("", pattern, "zzz"), "")

    def test_no_match_is_identity(self) -> None:
        self.assertEqual(replace_keep_case("Hello", "xyz", "abc"), "Hello")

    def test_pattern_longer_than_text(self) -> None:
        self.assertEqual(replace_keep_case("he", "hello", "hi"), "he")


class ReplaceCaseTests(unittest.TestCase):
    def test_documented_examples(self) -> None:
        self.assertEqual(replace_keep_case("Hello World", "hello", "hi"), "Hi World")
        self.assertEqual(replace_keep_case("hello World", "hello", "hi"), "hi World")
        self.assertEqual(replace_keep_case("HELLO World", "hello", "hi"), "HI World")

    def test_pattern_case_is_ignored(self) -> None:
        self.assertEqual(replace_keep_case("Hello", "HELLO", "hi"), "Hi")

    def test_overflow_follows_next_letter(self) -> None:
        self.assertEqual(replace_keep_case("upTO", "up", "uwp"), "uwPTO")
        self.assertEqual(replace_keep_case("UPto", "up", "uwp"), "UWpto")

    def test_overflow_falls_back_to_last_match_char(self) -> None:
        self.assertEqual(replace_keep_case("UP to", "up", "uwp"), "UWP to")
        self.assertEqual(replace_keep_case("Up!", "up", "uwp"), "Uwp!")

    def test_symbols_in_replacement_survive(self) -> None:
        self.assertEqual(replace_keep_case("C++", "c++", "c++ (rust <3)"), "C++ (rust <3)")

    def test_all_upper_match_with_equal_length_stays_upper(self) -> None:
        for word in ["TH", "THE", "XTHX", "TH TH"]:
            out = replace_keep_case(word, "th", "tw")
            self.assertEqual(out, word.replace("TH", "TW"))

    def test_case_copy_holds_for_every_mixed_case_variant(self) -> None:
        for chars in itertools.product("hH", "eE", "yY"):
            found = "".join(chars)
            out = replace_keep_case(found, "hey", "abc")
            expected = "".join(r.upper() if f.isupper() else r for f, r in zip(found, "abc"))
            self.assertEqual(out, expected)


class ReplaceScanTests(unittest.TestCase):
    def test_inserted_text_is_not_rescanned(self) -> None:
        self.assertEqual(replace_keep_case("aaa", "a", "aa"), "aaaaaa")
        self.assertEqual(replace_keep_case("hi", "hi", "hihi"), "hihi")

    def test_rejected_candidate_advances_one_character(self) -> None:
        out = replace_keep_case("lll", "ll", "ww", lambda ctx: ctx.index == 1)
        self.assertEqual(out, "lww")

    def test_accepted_match_consumes_its_span(self) -> None:
        self.assertEqual(replace_keep_case("llll", "ll", "w"), "ww")

    def test_predicate_sees_original_text_and_exact_match(self) -> None:
        seen: List[MatchContext] = []

        def _record(ctx: MatchContext) -> bool:
            seen.append(ctx)
            return True

        out = replace_keep_case("Ab ab AB", "ab", "xyz", _record)
        self.assertEqual(out, "Xyz xyz XYZ")
        self.assertEqual([c.index for c in seen], [0, 3, 6])
        self.assertEqual([c.found for c in seen], ["Ab", "ab", "AB"])
        self.assertTrue(all(c.text == "Ab ab AB" for c in seen))

    def test_replacer_instance_matches_shortcut(self) -> None:
        replacer = CaseKeepingReplacer()
        self.assertEqual(
            replacer.replace("The truth", "th", "tw"),
            replace_keep_case("The truth", "th", "tw"),
        )


if __name__ == "__main__":
    unittest.main()
