"""
Tests for the text summary report and JSON export.
"""

import json
import tempfile
import unittest
from pathlib import Path

from h2explorer.resources.models import RenewableSource
from h2explorer.tea.models import DerivativeInputs, GreenHydrogenInputs
from h2explorer.tea.reporting import (
    export_results_json,
    format_aligned_line,
    format_aligned_section,
    generate_summary_report,
    write_summary_report,
)
from h2explorer.tea.tea_engine import TEAEngine
from sample_data import make_regional_dataframe


class TestFormatting(unittest.TestCase):

    def test_aligned_line(self):
        self.assertEqual(format_aligned_line("A", "1", min_width=3), "  A   : 1\n")

    def test_aligned_section_uses_longest_name(self):
        text = format_aligned_section({"short": 1, "a much longer name than forty characters!": 2})
        lines = text.splitlines()
        self.assertEqual(lines[0].index(":"), lines[1].index(":"))

    def test_empty_section(self):
        self.assertEqual(format_aligned_section({}), "")


class TestSummaryReport(unittest.TestCase):

    def setUp(self):
        self.engine = TEAEngine(make_regional_dataframe())
        self.tmp = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_report_sections(self):
        result = self.engine.calculate(GreenHydrogenInputs(region="Sunland"))
        report = generate_summary_report(result)
        for heading in ("Project", "Production", "Economics", "Cost Breakdown", "Environment"):
            self.assertIn(heading, report)
        self.assertIn("Sunland", report)
        self.assertIn("/kg", report)
        self.assertIn("electricity", report)
        self.assertIn("Sensitivity", report)

    def test_degenerate_result_renders_na(self):
        result = self.engine.calculate(GreenHydrogenInputs(region="Sunland",
                                                           renewable_source=RenewableSource.HYDRO))
        report = generate_summary_report(result)
        self.assertIn("N/A", report)
        self.assertIn("Never", report)
        self.assertIn("Notes", report)
        self.assertIn("hydropower", report)

    def test_derivative_report_uses_tonnes(self):
        result = self.engine.calculate(DerivativeInputs(region="Sunland", product="methanol"))
        report = generate_summary_report(result)
        self.assertIn("/t", report)
        self.assertIn("CO2 Feed (t/yr)", report)
        self.assertIn("Competitiveness", report)

    def test_write_summary_report(self):
        result = self.engine.calculate(GreenHydrogenInputs(region="Gusty"))
        path = write_summary_report(result, self.tmp_path / "nested" / "summary.txt")
        self.assertTrue(path.exists())
        self.assertEqual(path.read_text(encoding="utf-8"), generate_summary_report(result))

    def test_json_export_writes_null_for_nan(self):
        result = self.engine.calculate(GreenHydrogenInputs(region="Sunland",
                                                           renewable_source=RenewableSource.HYDRO))
        path = export_results_json(result, self.tmp_path / "result.json")
        data = json.loads(path.read_text(encoding="utf-8"))
        self.assertIsNone(data["lcoh"])
        self.assertIsNone(data["levelized_cost"])
        self.assertIsNone(data["carbon_intensity"])
        self.assertEqual(data["payback_period"], "Infinity")
        self.assertEqual(data["status"], "resource_unavailable")
        self.assertEqual(data["pathway"], "green")
        self.assertIsInstance(data["notes"], list)

    def test_json_export_of_regular_result(self):
        result = self.engine.calculate(GreenHydrogenInputs(region="Sunland"))
        data = json.loads(export_results_json(result, self.tmp_path / "ok.json").read_text())
        self.assertAlmostEqual(data["lcoh"], result.lcoh)
        self.assertEqual(len(data["cash_flows"]), 21)
        self.assertIn("sensitivity", data)
        self.assertEqual(data["bottleneck"], "power")


def test_report_for_unknown_region_lists_warning(resolver):
    from h2explorer.tea.green_hydrogen import calculate_green_hydrogen

    result = calculate_green_hydrogen(GreenHydrogenInputs(region="Atlantis"), resolver.resolve("Atlantis"))
    report = generate_summary_report(result)
    assert "data_missing" in report
    assert "Regional data not available for 'Atlantis'" in report


def test_report_shows_unconstrained_water(sample_regional_data):
    engine = TEAEngine(sample_regional_data)
    result = engine.calculate(GreenHydrogenInputs(region="Atlantis"))
    assert "unconstrained" in generate_summary_report(result)
