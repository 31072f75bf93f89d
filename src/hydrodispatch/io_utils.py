import logging
import os
from dataclasses import dataclass

import pandas as pd

from .errors import TurbineDataError
from .turbine import N_COEFFICIENTS, Turbine

logger = logging.getLogger(__name__)

POWER_LIMITS_FILE = "power_limits.csv"
FLOW_LIMITS_FILE = "flow_limits.csv"
COEFFICIENTS_FILE = "efficiency_coefficients.csv"
SEPARATOR = ";"


@dataclass(frozen=True, slots=True)
class TurbineSpec:
    """Turbine parameters as read from a data source, before the turbine is built."""

    min_power: float
    max_power: float
    min_flow: float
    max_flow: float
    coefficients: tuple[float, ...]

    def build(self) -> Turbine:
        return Turbine(
            min_power=self.min_power,
            max_power=self.max_power,
            min_flow=self.min_flow,
            max_flow=self.max_flow,
            coefficients=self.coefficients,
        )


def _read_table(path: str) -> pd.DataFrame:
    if not os.path.exists(path):
        raise TurbineDataError(f"Turbine data file {path} does not exist.")
    try:
        df = pd.read_csv(
            path,
            sep=SEPARATOR,
            header=None,
            dtype=str,
            skip_blank_lines=True,
            keep_default_na=False,
            na_values=[""],
        )
    except pd.errors.EmptyDataError as e:
        raise TurbineDataError(f"Turbine data file {path} is empty.") from e
    except pd.errors.ParserError as e:
        raise TurbineDataError(f"Malformed turbine data file {path}: rows of different lengths.") from e
    if df.isna().any().any():
        raise TurbineDataError(f"Malformed turbine data file {path}: rows of different lengths.")
    try:
        numbers = df.apply(lambda col: pd.to_numeric(col.str.strip(), errors="raise"))
    except ValueError as e:
        raise TurbineDataError(f"Malformed turbine data file {path}: could not parse numbers.") from e
    # to_numeric turns a literal "nan" into NaN without raising
    if numbers.isna().any().any():
        raise TurbineDataError(f"Malformed turbine data file {path}: could not parse numbers.")
    return numbers


def _read_limits(path: str) -> tuple[list[float], list[float]]:
    df = _read_table(path)
    if len(df) < 2:
        raise TurbineDataError(f"Turbine data file {path} must have a minimum row and a maximum row.")
    return [float(v) for v in df.iloc[0]], [float(v) for v in df.iloc[1]]


def load_turbine_specs(directory: str) -> list[TurbineSpec]:
    """
    Load turbine parameters from a directory of ';'-separated files.

    The directory must hold:
        power_limits.csv: minimum powers on the first row, maximum powers on the second
        flow_limits.csv: minimum flows on the first row, maximum flows on the second
        efficiency_coefficients.csv: one efficiency coefficient per line

    Each column of the limit files describes one turbine; all turbines share
    the efficiency coefficients.

    Args:
        directory (str): Path to the directory holding the three files

    Returns:
        list[TurbineSpec]: One spec per turbine, in column order

    Raises:
        TurbineDataError: If a file is missing or malformed
    """
    min_power, max_power = _read_limits(os.path.join(directory, POWER_LIMITS_FILE))
    min_flow, max_flow = _read_limits(os.path.join(directory, FLOW_LIMITS_FILE))

    coefficients_path = os.path.join(directory, COEFFICIENTS_FILE)
    coefficients_df = _read_table(coefficients_path)
    if coefficients_df.shape[1] != 1:
        raise TurbineDataError(
            f"Malformed turbine data file {coefficients_path}: expected one coefficient per line."
        )
    coefficients = tuple(float(v) for v in coefficients_df.iloc[:, 0])
    if len(coefficients) != N_COEFFICIENTS:
        raise TurbineDataError(
            f"Malformed turbine data file {coefficients_path}: "
            f"expected {N_COEFFICIENTS} coefficients, got {len(coefficients)}."
        )

    if len(min_power) != len(min_flow):
        raise TurbineDataError("Power and flow limit files describe a different number of turbines.")

    specs = [
        TurbineSpec(
            min_power=min_power[i],
            max_power=max_power[i],
            min_flow=min_flow[i],
            max_flow=max_flow[i],
            coefficients=coefficients,
        )
        for i in range(len(min_power))
    ]
    logger.info(f"Loaded {len(specs)} turbines from {directory}")
    return specs
