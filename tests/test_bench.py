import tempfile
import unittest
from pathlib import Path

import pandas as pd

from c4solver_bench.__main__ import main as bench_main
from c4solver_bench.io.reference import (
    ReferenceFormatError,
    load_reference,
    parse_reference_line,
    read_reference_file,
    reference_files,
)
from c4solver_bench.metrics.summarize import LoadSpec, cost_by_depth, failures, load_results, summarize
from c4solver_bench.runner import RESULT_COLS, run_reference

FIXTURES = Path(__file__).parent / "fixtures"


class TestReferenceParsing(unittest.TestCase):
    def test_parse_line(self):
        entry = parse_reference_line("0101012 18\n", source="f.txt", line=3)
        self.assertEqual((entry.source, entry.line, entry.moves, entry.expected), ("f.txt", 3, "0101012", 18))

    def test_tabs_and_negative_scores(self):
        entry = parse_reference_line("11223\t-18")
        self.assertEqual((entry.moves, entry.expected), ("11223", -18))

    def test_blank_and_comment_lines(self):
        self.assertIsNone(parse_reference_line(""))
        self.assertIsNone(parse_reference_line("   \n"))
        self.assertIsNone(parse_reference_line("# header"))

    def test_malformed_lines(self):
        for text in ["0101", "01a1 3", "0101 x", "01 2 3"]:
            with self.subTest(text=text):
                with self.assertRaises(ReferenceFormatError) as ctx:
                    parse_reference_line(text, source="bad.txt", line=7)
                self.assertEqual((ctx.exception.source, ctx.exception.line), ("bad.txt", 7))
                self.assertIn("bad.txt:7", str(ctx.exception))

    def test_read_fixture_file(self):
        entries = read_reference_file(FIXTURES / "hand_positions.txt")
        self.assertGreaterEqual(len(entries), 5)
        self.assertEqual(entries[0].line, 2)  # line 1 is a comment

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            read_reference_file(FIXTURES / "nope.txt")
        with self.assertRaises(FileNotFoundError):
            reference_files(FIXTURES / "nope")

    def test_load_reference_frame(self):
        df = load_reference(reference_files(FIXTURES))
        self.assertEqual(list(df.columns), ["source", "line", "moves", "expected"])
        self.assertIn("0101012", set(df["moves"]))
        self.assertTrue(pd.api.types.is_integer_dtype(df["expected"]))


class TestRunner(unittest.TestCase):
    def test_fixtures_pass_on_every_board(self):
        ref = load_reference([FIXTURES / "hand_positions.txt"])
        for kind in ("grid", "history", "bit"):
            with self.subTest(board=kind):
                out = run_reference(ref, kind)
                self.assertEqual(list(out.columns), RESULT_COLS)
                self.assertEqual(len(out), len(ref))
                self.assertTrue(out["ok"].all(), out[~out["ok"]].to_string())
                self.assertTrue((out["nodes"] >= 1).all())

    def test_mismatch_and_bad_moves_are_reported(self):
        ref = pd.DataFrame(
            [("t", 1, "010101", 5), ("t", 2, "0000000", 0), ("t", 3, "9", 0)],
            columns=["source", "line", "moves", "expected"],
        )
        out = run_reference(ref, "bit")
        self.assertEqual(list(out["ok"]), [False, False, False])
        self.assertEqual(out.loc[0, "actual"], 18)
        self.assertIn("full", out.loc[1, "error"])
        self.assertIn("out of range", out.loc[2, "error"])

        bad = failures(out)
        self.assertEqual(len(bad), 3)

    def test_summary(self):
        ref = load_reference([FIXTURES / "hand_positions.txt"])
        out = pd.concat([run_reference(ref, "bit"), run_reference(ref, "grid")], ignore_index=True)
        summary = summarize(out)
        self.assertEqual(sorted(summary["board"]), ["bit", "grid"])
        self.assertTrue((summary["pass_rate"] == 1.0).all())
        self.assertTrue((summary["lines"] == len(ref)).all())

        by_depth = cost_by_depth(out)
        self.assertEqual(list(by_depth.columns), ["board", "num_moves", "nodes", "time_ms"])

    def test_summary_of_empty_results(self):
        empty = pd.DataFrame(columns=RESULT_COLS)
        self.assertTrue(summarize(empty).empty)


class TestCsvAndCli(unittest.TestCase):
    def test_run_then_analyze(self):
        with tempfile.TemporaryDirectory() as tmp:
            csv_path = Path(tmp) / "results.csv"
            code = bench_main([
                "run",
                "--ref", str(FIXTURES / "hand_positions.txt"),
                "--board", "all",
                "--csv", str(csv_path),
            ])
            self.assertEqual(code, 0)

            df = load_results(LoadSpec(csv_path=csv_path))
            self.assertEqual(len(df), 3 * len(read_reference_file(FIXTURES / "hand_positions.txt")))
            self.assertTrue(df["ok"].all())
            # leading zeros in move strings survive the round trip
            self.assertIn("010101", set(df["moves"]))

            figures = Path(tmp) / "figures"
            code = bench_main(["analyze", "--csv", str(csv_path), "--figures", str(figures)])
            self.assertEqual(code, 0)
            self.assertTrue((figures / "time_ms_by_depth.png").exists())
            self.assertTrue((figures / "hist_nodes.png").exists())

    def test_run_reports_failures(self):
        with tempfile.TemporaryDirectory() as tmp:
            ref = Path(tmp) / "wrong.txt"
            ref.write_text("010101 3\n")
            self.assertEqual(bench_main(["run", "--ref", str(ref)]), 1)

    def test_missing_columns(self):
        with tempfile.TemporaryDirectory() as tmp:
            csv_path = Path(tmp) / "bad.csv"
            csv_path.write_text("a,b\n1,2\n")
            with self.assertRaises(ValueError):
                load_results(LoadSpec(csv_path=csv_path))

    def test_unknown_command(self):
        self.assertEqual(bench_main(["bogus"]), 2)


if __name__ == "__main__":
    unittest.main()
