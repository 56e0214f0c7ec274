"""
Input validation of the parameter bundles.
"""

import unittest

from h2explorer.resources.models import RenewableSource, SizingMode, WaterSource
from h2explorer.tea.models import (
    BlueHydrogenInputs,
    CO2Source,
    DerivativeInputs,
    EconomicAssumptions,
    GreenHydrogenInputs,
    HydrogenSource,
    InvalidConfigurationError,
    Procurement,
)


class TestEconomicAssumptions(unittest.TestCase):

    def test_defaults(self):
        economics = EconomicAssumptions()
        self.assertEqual(economics.discount_rate, 0.08)
        self.assertEqual(economics.project_lifetime_years, 20)
        self.assertIsNone(economics.selling_price)

    def test_invalid_lifetime(self):
        for lifetime in (0, -5, 101, 20.5):
            with self.subTest(lifetime=lifetime):
                with self.assertRaises(InvalidConfigurationError):
                    EconomicAssumptions(project_lifetime_years=lifetime)

    def test_float_lifetime_coerced(self):
        self.assertEqual(EconomicAssumptions(project_lifetime_years=25.0).project_lifetime_years, 25)

    def test_invalid_discount_rate(self):
        for rate in (-0.01, 1.5, float("nan")):
            with self.subTest(rate=rate):
                with self.assertRaises(InvalidConfigurationError):
                    EconomicAssumptions(discount_rate=rate)

    def test_adjustment_floor(self):
        with self.assertRaises(InvalidConfigurationError):
            EconomicAssumptions(capex_adjustment=-1.0)
        self.assertEqual(EconomicAssumptions(opex_adjustment=-0.5).opex_adjustment, -0.5)

    def test_error_is_value_error(self):
        with self.assertRaises(ValueError):
            EconomicAssumptions(discount_rate=2.0)


class TestGreenInputs(unittest.TestCase):

    def test_string_values_coerced(self):
        inputs = GreenHydrogenInputs(region="Sunland", electrolyzer="pem", renewable_source="Wind",
                                     water_source="brackish", sizing_mode="custom",
                                     custom_capacity_mw=150, procurement="OWN")
        self.assertEqual(inputs.electrolyzer, "PEM")
        self.assertEqual(inputs.renewable_source, RenewableSource.WIND)
        self.assertEqual(inputs.water_source, WaterSource.BRACKISH)
        self.assertEqual(inputs.sizing_mode, SizingMode.CUSTOM_CAPACITY)
        self.assertEqual(inputs.procurement, Procurement.OWN)
        self.assertEqual(inputs.custom_capacity_mw, 150.0)

    def test_unknown_electrolyzer(self):
        with self.assertRaises(InvalidConfigurationError):
            GreenHydrogenInputs(region="Sunland", electrolyzer="PEMFC")

    def test_unknown_source(self):
        with self.assertRaises(InvalidConfigurationError):
            GreenHydrogenInputs(region="Sunland", renewable_source="geothermal")

    def test_negative_price(self):
        with self.assertRaises(InvalidConfigurationError):
            GreenHydrogenInputs(region="Sunland", electricity_price_usd_per_kwh=-0.01)

    def test_table_defaults_and_overrides(self):
        inputs = GreenHydrogenInputs(region="Sunland", renewable_source="wind")
        self.assertEqual(inputs.electricity_price, 0.040)
        self.assertEqual(inputs.res_capex_per_mw, 1_300_000)
        override = GreenHydrogenInputs(region="Sunland", res_capex_usd_per_mw=1.0e6)
        self.assertEqual(override.res_capex_per_mw, 1.0e6)


class TestBlueInputs(unittest.TestCase):

    def test_capture_rate_bounds(self):
        for rate in (-0.1, 1.2):
            with self.subTest(rate=rate):
                with self.assertRaises(InvalidConfigurationError):
                    BlueHydrogenInputs(region="Sunland", capture_rate=rate)

    def test_plant_capacity_positive(self):
        with self.assertRaises(InvalidConfigurationError):
            BlueHydrogenInputs(region="Sunland", plant_capacity_mw=0)

    def test_unknown_technology(self):
        with self.assertRaises(InvalidConfigurationError):
            BlueHydrogenInputs(region="Sunland", technology="coal gasification")

    def test_negative_gas_price(self):
        with self.assertRaises(InvalidConfigurationError):
            BlueHydrogenInputs(region="Sunland", gas_price_usd_per_mmbtu=-1)


class TestDerivativeInputs(unittest.TestCase):

    def test_defaults(self):
        inputs = DerivativeInputs(region="Sunland")
        self.assertEqual(inputs.product, "ammonia")
        self.assertEqual(inputs.hydrogen_source, HydrogenSource.GREEN)
        self.assertEqual(inputs.effective_process_efficiency, 0.85)

    def test_process_efficiency_bounds(self):
        self.assertEqual(DerivativeInputs(region="Sunland", process_efficiency=1.0).process_efficiency, 1.0)
        for efficiency in (0.0, 1.01):
            with self.subTest(efficiency=efficiency):
                with self.assertRaises(InvalidConfigurationError):
                    DerivativeInputs(region="Sunland", process_efficiency=efficiency)

    def test_product_and_source_lookup(self):
        inputs = DerivativeInputs(region="Sunland", product="E-FUELS", co2_source="Biogenic")
        self.assertEqual(inputs.product, "e-fuels")
        self.assertEqual(inputs.co2_source, CO2Source.BIOGENIC)
        with self.assertRaises(InvalidConfigurationError):
            DerivativeInputs(region="Sunland", product="urea")


if __name__ == '__main__':
    unittest.main()
