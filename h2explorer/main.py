"""
Command-line entry point: run one pathway calculation for one or more
regions and write the summary report (and optionally JSON) to disk.

Example:
    h2explorer --mode green --regions input/regional_data.csv \
        --region Almaty --params input/green_params.csv --json
"""

import logging
import sys
import timeit
from argparse import ArgumentParser
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from .resources.data_loader import (
    get_param_value,
    load_calculation_params,
    load_regional_dataset,
)
from .tea.config import BASE_INPUT_DIR_DEFAULT, BASE_OUTPUT_DIR_DEFAULT, LOG_DIR
from .tea.models import (
    BlueHydrogenInputs,
    DerivativeInputs,
    EconomicAssumptions,
    GreenHydrogenInputs,
    InvalidConfigurationError,
)
from .tea.reporting import export_results_json, generate_summary_report, write_summary_report
from .tea.tea_engine import TEAEngine, summarize_results
from .tea.utils import close_tea_module_logger, setup_tea_module_logger

logger = logging.getLogger(__name__)

# Parameter,Value keys accepted per input bundle
ECONOMIC_PARAMS: Dict[str, Callable[[Any], Any]] = {
    "discount_rate": float,
    "project_lifetime_years": float,
    "selling_price": float,
    "capex_adjustment": float,
    "opex_adjustment": float,
}

MODE_PARAMS: Dict[str, Dict[str, Callable[[Any], Any]]] = {
    "green": {
        "electrolyzer": str,
        "renewable_source": str,
        "water_source": str,
        "sizing_mode": str,
        "custom_capacity_mw": float,
        "procurement": str,
        "electricity_price_usd_per_kwh": float,
        "res_capex_usd_per_mw": float,
        "res_fixed_om_fraction": float,
    },
    "blue": {
        "technology": str,
        "plant_capacity_mw": float,
        "capture_rate": float,
        "water_source": str,
        "gas_price_usd_per_mmbtu": float,
        "co2_price_usd_per_t": float,
        "ccs_credit_fraction": float,
        "co2_transport_distance_km": float,
        "auxiliary_electricity_price_usd_per_mwh": float,
    },
    "derivatives": {
        "product": str,
        "plant_capacity_ktpa": float,
        "hydrogen_source": str,
        "nitrogen_source": str,
        "co2_source": str,
        "water_source": str,
        "process_efficiency": float,
        "h2_price_usd_per_kg": float,
        "electricity_price_usd_per_mwh": float,
    },
}

INPUT_CLASSES = {
    "green": GreenHydrogenInputs,
    "blue": BlueHydrogenInputs,
    "derivatives": DerivativeInputs,
}


def _collect(params: Dict[str, Any], spec: Dict[str, Callable[[Any], Any]]) -> Dict[str, Any]:
    """Parameters present in the file; absent keys keep the dataclass defaults."""
    kwargs = {}
    for key, converter in spec.items():
        if key not in params:
            continue
        value = get_param_value(params, key, None, converter)
        if value is not None:
            kwargs[key] = value.strip() if isinstance(value, str) else value
    return kwargs


def build_inputs(mode: str, region: str, params: Dict[str, Any]):
    """
    Build the input bundle for a pathway from a parameter dict.

    Raises:
        InvalidConfigurationError: a supplied value is outside its domain
    """
    economics = EconomicAssumptions(**_collect(params, ECONOMIC_PARAMS))
    return INPUT_CLASSES[mode](region=region, economics=economics,
                               **_collect(params, MODE_PARAMS[mode]))


def parse_cli() -> ArgumentParser:
    p = ArgumentParser(description="Hydrogen feasibility techno-economic calculation")
    p.add_argument("--mode", choices=sorted(INPUT_CLASSES), default="green",
                   help="Production pathway (default: %(default)s)")
    p.add_argument("--regions", type=Path, default=BASE_INPUT_DIR_DEFAULT / "regional_data.csv",
                   help="Regional resource CSV (default: %(default)s)")
    p.add_argument("--region", action="append", dest="region_names", metavar="NAME",
                   help="Region to evaluate; repeat for several (default: every region in the dataset)")
    p.add_argument("--params", type=Path, default=None,
                   help="Parameter,Value CSV overriding the defaults")
    p.add_argument("--output", type=Path, default=BASE_OUTPUT_DIR_DEFAULT,
                   help="Output directory (default: %(default)s)")
    p.add_argument("--json", action="store_true", help="Also export results as JSON")
    p.add_argument("--log-dir", type=Path, default=LOG_DIR / "tea",
                   help="Directory for per-region run logs (default: %(default)s)")
    return p


def _safe_name(label: str) -> str:
    return "".join(c if c.isalnum() or c in "-_" else "_" for c in label) or "region"


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_cli().parse_args(argv)
    t0 = timeit.default_timer()

    # 1. data ----------------------------------------------------------------
    dataset = load_regional_dataset(args.regions)
    params = load_calculation_params(args.params) if args.params else {}
    engine = TEAEngine(dataset)

    regions = args.region_names or engine.resolver.region_names
    if not regions:
        print("No regions given and the regional dataset is empty; use --region NAME", file=sys.stderr)
        return 1

    # 2. calculations --------------------------------------------------------
    output_dir = Path(args.output) / args.mode
    results = []
    for region in regions:
        run_logger = setup_tea_module_logger(region, args.mode, args.log_dir)
        try:
            run_logger.info(f"--- {args.mode} calculation for {region} ---")
            try:
                inputs = build_inputs(args.mode, region, params)
            except InvalidConfigurationError as e:
                run_logger.error(f"Invalid configuration: {e}")
                return 2

            result = engine.calculate(inputs)
            results.append(result)

            print(generate_summary_report(result))
            report_path = write_summary_report(
                result, output_dir / f"{args.mode}_{_safe_name(region)}_summary.txt")
            print(f"Summary report: {report_path}")
            if args.json:
                json_path = export_results_json(
                    result, output_dir / f"{args.mode}_{_safe_name(region)}_results.json")
                print(f"JSON results: {json_path}")
        finally:
            close_tea_module_logger(run_logger)

    # 3. comparison ----------------------------------------------------------
    if len(results) > 1:
        comparison = summarize_results(results)
        comparison_path = output_dir / f"{args.mode}_region_comparison.csv"
        comparison.to_csv(comparison_path, index=False)
        print(comparison.to_string(index=False))
        print(f"Region comparison: {comparison_path}")

    logger.info(f"Finished {len(results)} calculation(s) in {timeit.default_timer() - t0:.2f} s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
