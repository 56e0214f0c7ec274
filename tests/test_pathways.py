"""
End-to-end tests of the green, blue and derivative pathway calculators and
the TEA engine.
"""

import math
import unittest

import pandas as pd

from h2explorer.resources.models import Bottleneck, RenewableSource, SizingMode, WaterSource
from h2explorer.tea.blue_hydrogen import nameplate_output_kg
from h2explorer.tea.models import (
    BlueHydrogenInputs,
    BlueHydrogenResult,
    DerivativeInputs,
    DerivativeResult,
    GreenHydrogenInputs,
    GreenHydrogenResult,
    Pathway,
    Procurement,
    ResultStatus,
)
from h2explorer.tea.tea_engine import SUMMARY_COLUMNS, TEAEngine, run_calculation
from sample_data import SAMPLE_REGIONS, make_regional_dataframe


class TestGreenHydrogen(unittest.TestCase):

    def setUp(self):
        self.engine = TEAEngine(make_regional_dataframe())

    def test_solar_maximum_potential_scenario(self):
        result = self.engine.calculate(GreenHydrogenInputs(region="Sunland"))
        self.assertIsInstance(result, GreenHydrogenResult)
        self.assertEqual(result.pathway, Pathway.GREEN)
        self.assertEqual(result.status, ResultStatus.OK)
        # 3500 MW * 1000 * 1500 kWh/kW / 52 kWh/kg
        self.assertAlmostEqual(result.annual_production, 5.25e9 / 52 / 1000, places=3)
        self.assertAlmostEqual(result.daily_production, result.annual_production / 365)
        self.assertEqual(result.bottleneck, Bottleneck.POWER)
        self.assertAlmostEqual(result.installed_capacity_mw, 3500.0)
        self.assertAlmostEqual(result.effective_capacity_mw, 3500.0)
        self.assertFalse(math.isinf(result.water_limited_production))
        self.assertTrue(result.levelized_cost > 0)
        self.assertEqual(result.lcoh, result.levelized_cost)
        self.assertAlmostEqual(result.system_efficiency, 33.33 / 52 * 100)

    def test_breakdown_sums_to_lcoh(self):
        result = self.engine.calculate(GreenHydrogenInputs(region="Sunland"))
        self.assertAlmostEqual(sum(result.cost_breakdown.values()), result.lcoh, delta=1e-6)

    def test_buy_procurement_has_no_renewable_capex(self):
        result = self.engine.calculate(GreenHydrogenInputs(region="Sunland",
                                                           procurement=Procurement.BUY))
        self.assertEqual(result.renewable_capex, 0.0)
        self.assertNotIn("renewables", result.economics.capex_breakdown)
        expected = result.limits.total_energy_kwh * 0.045 / 1e6
        self.assertAlmostEqual(result.electricity_cost, expected)

    def test_own_procurement_has_no_electricity_cost(self):
        result = self.engine.calculate(GreenHydrogenInputs(region="Sunland", procurement="own"))
        self.assertEqual(result.electricity_cost, 0.0)
        self.assertNotIn("electricity", result.economics.opex_components)
        self.assertIn("res_fixed_om", result.economics.opex_components)
        self.assertAlmostEqual(result.renewable_capex, 3500.0 * 900_000 / 1e6)

    def test_own_procurement_prices_effective_capacity(self):
        result = self.engine.calculate(GreenHydrogenInputs(region="Dryland", procurement="own"))
        self.assertEqual(result.bottleneck, Bottleneck.WATER)
        self.assertAlmostEqual(result.renewable_capex, result.effective_capacity_mw * 900_000 / 1e6)
        self.assertTrue(result.renewable_capex < result.installed_capacity_mw * 0.9)

    def test_electrolyzer_specific_energy(self):
        for electrolyzer, kwh_per_kg in (("PEM", 52.0), ("Alkaline", 52.0), ("SOEC", 45.0)):
            result = self.engine.calculate(GreenHydrogenInputs(region="Sunland",
                                                               electrolyzer=electrolyzer))
            self.assertAlmostEqual(result.annual_production, 5.25e9 / kwh_per_kg / 1000, places=3)

    def test_electricity_price_override(self):
        base = self.engine.calculate(GreenHydrogenInputs(region="Sunland"))
        cheaper = self.engine.calculate(GreenHydrogenInputs(region="Sunland",
                                                            electricity_price_usd_per_kwh=0.02))
        self.assertTrue(cheaper.lcoh < base.lcoh)

    def test_water_limited_region(self):
        result = self.engine.calculate(GreenHydrogenInputs(region="Dryland"))
        self.assertEqual(result.bottleneck, Bottleneck.WATER)
        # 0.2 Mm3 / 9 L/kg
        self.assertAlmostEqual(result.annual_production, 0.2e6 / 0.009 / 1000, places=3)
        self.assertAlmostEqual(result.annual_water_use, 0.2e6, places=3)
        self.assertAlmostEqual(result.limits.auxiliary_energy_kwh, 0.2e6 * 0.5, places=3)
        self.assertTrue(result.effective_capacity_mw < result.installed_capacity_mw)
        self.assertTrue(any("water-limited" in note for note in result.notes))
        # brackish volume missing in the dataset
        self.assertEqual(result.status, ResultStatus.DATA_MISSING)

    def test_zero_water_gives_undefined_ratios(self):
        result = self.engine.calculate(GreenHydrogenInputs(region="Dryland",
                                                           water_source=WaterSource.TREATED))
        self.assertEqual(result.status, ResultStatus.UNDEFINED_RATIO)
        self.assertEqual(result.annual_production, 0.0)
        self.assertTrue(math.isnan(result.lcoh))
        self.assertTrue(math.isnan(result.carbon_intensity))
        self.assertEqual(result.co2_avoided, 0.0)

    def test_hydro_without_potential(self):
        result = self.engine.calculate(GreenHydrogenInputs(region="Sunland",
                                                           renewable_source=RenewableSource.HYDRO))
        self.assertEqual(result.status, ResultStatus.RESOURCE_UNAVAILABLE)
        self.assertFalse(result.resource_available)
        self.assertEqual(result.annual_production, 0.0)
        self.assertTrue(math.isnan(result.lcoh))
        self.assertTrue(any("hydropower" in note for note in result.notes))
        self.assertTrue(math.isinf(result.payback_period))
        self.assertTrue(math.isnan(result.irr))

    def test_custom_hydro_capacity(self):
        result = self.engine.calculate(GreenHydrogenInputs(region="Dryland", renewable_source="hydro",
                                                           sizing_mode=SizingMode.CUSTOM_CAPACITY,
                                                           custom_capacity_mw=50.0,
                                                           water_source="groundwater"))
        self.assertEqual(result.installed_capacity_mw, 50.0)
        self.assertEqual(result.effective_capacity_mw, 50.0)
        self.assertAlmostEqual(result.capacity_factor, 0.45)

    def test_unknown_region_uses_defaults(self):
        known = self.engine.calculate(GreenHydrogenInputs(region="Sunland"))
        unknown = self.engine.calculate(GreenHydrogenInputs(region="Atlantis"))
        self.assertEqual(unknown.status, ResultStatus.DATA_MISSING)
        self.assertTrue(unknown.warnings)
        self.assertAlmostEqual(unknown.annual_production, known.annual_production, places=6)
        self.assertTrue(any("No water availability data" in n for n in unknown.notes))

    def test_carbon_intensity_of_solar_electrolysis(self):
        result = self.engine.calculate(GreenHydrogenInputs(region="Sunland"))
        self.assertAlmostEqual(result.emissions_by_stage["electrolysis"], 0.045 * 52)
        self.assertAlmostEqual(result.carbon_intensity, 0.045 * 52 + 0.045 * 0.009 * 0.5)
        expected_avoided = (10.0 - result.carbon_intensity) * result.annual_production
        self.assertAlmostEqual(result.co2_avoided, expected_avoided, places=3)


class TestBlueHydrogen(unittest.TestCase):

    def setUp(self):
        self.engine = TEAEngine(make_regional_dataframe())

    def test_default_smr(self):
        result = self.engine.calculate(BlueHydrogenInputs(region="Sunland"))
        self.assertIsInstance(result, BlueHydrogenResult)
        self.assertEqual(result.status, ResultStatus.OK)
        output_kg = nameplate_output_kg(100.0)
        self.assertAlmostEqual(result.annual_production, output_kg / 1000, places=6)
        self.assertAlmostEqual(result.gas_consumption_mmbtu, output_kg * 0.16 * (1 + 0.1 * 0.9), places=3)
        self.assertAlmostEqual(result.co2_generated, output_kg * 9.0 / 1000, places=3)
        self.assertAlmostEqual(result.co2_captured, result.co2_generated * 0.9, places=3)
        self.assertAlmostEqual(result.emissions_by_stage["reforming"], 0.9)
        self.assertTrue(result.economics.capex_breakdown["ccs"] > 0)
        self.assertAlmostEqual(sum(result.cost_breakdown.values()), result.lcoh, delta=1e-6)

    def test_ccs_capex_on_annual_captured_tonnes(self):
        result = self.engine.calculate(BlueHydrogenInputs(region="Sunland"))
        self.assertAlmostEqual(result.economics.capex_breakdown["ccs"], result.co2_captured * 200.0, places=3)
        self.assertAlmostEqual(result.specific_gas_consumption, 0.16)

    def test_zero_capture_books_no_ccs_capex(self):
        result = self.engine.calculate(BlueHydrogenInputs(region="Sunland", capture_rate=0.0))
        self.assertEqual(result.economics.capex_breakdown["ccs"], 0.0)
        self.assertEqual(result.co2_captured, 0.0)
        self.assertAlmostEqual(result.emissions_by_stage["reforming"], 9.0)

    def test_capture_lowers_carbon_intensity(self):
        low = self.engine.calculate(BlueHydrogenInputs(region="Sunland", capture_rate=0.5))
        high = self.engine.calculate(BlueHydrogenInputs(region="Sunland", capture_rate=0.95))
        self.assertTrue(high.carbon_intensity < low.carbon_intensity)

    def test_credit_fraction_changes_carbon_cost(self):
        no_credit = self.engine.calculate(BlueHydrogenInputs(region="Sunland", ccs_credit_fraction=0.0))
        full_credit = self.engine.calculate(BlueHydrogenInputs(region="Sunland", ccs_credit_fraction=1.0))
        self.assertTrue(full_credit.lcoh < no_credit.lcoh)

    def test_energy_use_includes_gas(self):
        result = self.engine.calculate(BlueHydrogenInputs(region="Sunland", technology="atr"))
        self.assertEqual(result.technology, "ATR")
        expected = result.gas_consumption_mmbtu * 0.293071 + result.limits.auxiliary_energy_kwh / 1000
        self.assertAlmostEqual(result.annual_energy_use, expected)


class TestDerivatives(unittest.TestCase):

    def setUp(self):
        self.engine = TEAEngine(make_regional_dataframe())

    def test_ammonia_uses_nitrogen(self):
        result = self.engine.calculate(DerivativeInputs(region="Sunland", product="ammonia"))
        self.assertIsInstance(result, DerivativeResult)
        self.assertEqual(result.status, ResultStatus.OK)
        self.assertEqual(result.feedstock_type, "nitrogen")
        self.assertEqual(result.feedstock_source, "air")
        self.assertAlmostEqual(result.feedstock_required, 100_000 * 0.822)
        self.assertAlmostEqual(result.h2_consumption, 100_000 * 0.178 / 0.85)
        self.assertIn("nitrogen_feedstock", result.cost_breakdown)
        self.assertAlmostEqual(result.annual_revenue, 100_000 * 500.0 / 1e6)

    def test_methanol_uses_co2(self):
        result = self.engine.calculate(DerivativeInputs(region="Sunland", product="Methanol",
                                                        co2_source="dac"))
        self.assertEqual(result.product, "methanol")
        self.assertEqual(result.feedstock_type, "co2")
        self.assertEqual(result.feedstock_source, "dac")
        self.assertAlmostEqual(result.feedstock_required, 100_000 * 1.375)
        self.assertIn("co2_feedstock", result.cost_breakdown)
        self.assertAlmostEqual(result.emissions_by_stage["process"], -1375.0)

    def test_process_efficiency_override(self):
        result = self.engine.calculate(DerivativeInputs(region="Sunland", process_efficiency=0.5))
        self.assertAlmostEqual(result.h2_consumption, 100_000 * 0.178 / 0.5)

    def test_market_metrics(self):
        result = self.engine.calculate(DerivativeInputs(region="Sunland"))
        self.assertAlmostEqual(result.total_product_cost, result.levelized_cost)
        self.assertAlmostEqual(result.competitiveness,
                               (500.0 - result.total_product_cost) / 500.0 * 100)
        self.assertTrue(result.production_cost < result.total_product_cost)

    def test_blue_hydrogen_feed_raises_intensity(self):
        green = self.engine.calculate(DerivativeInputs(region="Sunland", hydrogen_source="green"))
        blue = self.engine.calculate(DerivativeInputs(region="Sunland", hydrogen_source="blue"))
        self.assertTrue(blue.carbon_intensity > green.carbon_intensity)


class TestEngine(unittest.TestCase):

    def test_compare_regions(self):
        engine = TEAEngine(make_regional_dataframe())
        table = engine.compare_regions(GreenHydrogenInputs(region="Sunland"), ["Sunland", "Gusty"])
        self.assertIsInstance(table, pd.DataFrame)
        self.assertEqual(list(table.columns), SUMMARY_COLUMNS)
        self.assertEqual(list(table["region"]), ["Sunland", "Gusty"])
        self.assertEqual(table.loc[0, "pathway"], "green")

    def test_unsupported_inputs(self):
        with self.assertRaises(TypeError):
            TEAEngine().calculate("Sunland")

    def test_run_calculation_with_record_list(self):
        result = run_calculation(BlueHydrogenInputs(region="Gusty"), SAMPLE_REGIONS)
        self.assertEqual(result.region, "Gusty")
        self.assertEqual(result.pathway, Pathway.BLUE)

    def test_calls_are_independent(self):
        engine = TEAEngine(make_regional_dataframe())
        first = engine.calculate(GreenHydrogenInputs(region="Sunland"))
        engine.calculate(GreenHydrogenInputs(region="Dryland"))
        again = engine.calculate(GreenHydrogenInputs(region="Sunland"))
        self.assertEqual(first.lcoh, again.lcoh)


if __name__ == '__main__':
    unittest.main()
