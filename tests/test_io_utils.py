from pathlib import Path

import pytest

from hydrodispatch import Turbine, TurbineSpec, load_turbine_specs
from hydrodispatch.errors import TurbineDataError
from hydrodispatch.io_utils import COEFFICIENTS_FILE, FLOW_LIMITS_FILE, POWER_LIMITS_FILE

COEFFICIENT_LINES = "0.1463\n0.018076\n0.0050502\n-3.5254e-05\n-0.00012337\n-1.4507e-05\n"


def write_data(
    directory: Path,
    power: str = "35;36;37\n66;67;68\n",
    flow: str = "70;71;72\n140;141;142\n",
    coefficients: str = COEFFICIENT_LINES,
) -> Path:
    (directory / POWER_LIMITS_FILE).write_text(power)
    (directory / FLOW_LIMITS_FILE).write_text(flow)
    (directory / COEFFICIENTS_FILE).write_text(coefficients)
    return directory


class TestLoadTurbineSpecs:
    def test_one_spec_per_column(self, tmp_path: Path) -> None:
        specs = load_turbine_specs(str(write_data(tmp_path)))
        assert len(specs) == 3
        spec = specs[1]
        assert isinstance(spec, TurbineSpec)
        assert (spec.min_power, spec.max_power) == (36.0, 67.0)
        assert (spec.min_flow, spec.max_flow) == (71.0, 141.0)
        assert spec.coefficients == pytest.approx(
            (0.1463, 0.018076, 0.0050502, -3.5254e-05, -0.00012337, -1.4507e-05)
        )

    def test_turbines_share_coefficients(self, tmp_path: Path) -> None:
        specs = load_turbine_specs(str(write_data(tmp_path)))
        assert len({spec.coefficients for spec in specs}) == 1

    def test_tolerates_whitespace(self, tmp_path: Path) -> None:
        specs = load_turbine_specs(str(write_data(tmp_path, power="35 ; 36; 37\n66;67 ;68\n")))
        assert [spec.min_power for spec in specs] == [35.0, 36.0, 37.0]

    def test_spec_builds_turbine(self, tmp_path: Path) -> None:
        turbine = load_turbine_specs(str(write_data(tmp_path)))[0].build()
        assert isinstance(turbine, Turbine)
        assert turbine.flow_bounds == (70.0, 140.0)
        assert not turbine.is_connected

    def test_logs_loaded_count(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("INFO", logger="hydrodispatch.io_utils"):
            load_turbine_specs(str(write_data(tmp_path)))
        assert "Loaded 3 turbines" in caplog.text


class TestLoadTurbineSpecsErrors:
    def test_missing_file(self, tmp_path: Path) -> None:
        write_data(tmp_path)
        (tmp_path / FLOW_LIMITS_FILE).unlink()
        with pytest.raises(TurbineDataError, match="does not exist"):
            load_turbine_specs(str(tmp_path))

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(TurbineDataError, match="does not exist"):
            load_turbine_specs(str(tmp_path / "nowhere"))

    def test_short_row(self, tmp_path: Path) -> None:
        write_data(tmp_path, power="35;36;37\n66;67\n")
        with pytest.raises(TurbineDataError, match="rows of different lengths"):
            load_turbine_specs(str(tmp_path))

    def test_long_row(self, tmp_path: Path) -> None:
        write_data(tmp_path, flow="70;71\n140;141;142\n")
        with pytest.raises(TurbineDataError, match="rows of different lengths"):
            load_turbine_specs(str(tmp_path))

    def test_non_numeric_value(self, tmp_path: Path) -> None:
        write_data(tmp_path, power="35;abc;37\n66;67;68\n")
        with pytest.raises(TurbineDataError, match="could not parse numbers"):
            load_turbine_specs(str(tmp_path))

    def test_missing_maximum_row(self, tmp_path: Path) -> None:
        write_data(tmp_path, power="35;36;37\n")
        with pytest.raises(TurbineDataError, match="minimum row and a maximum row"):
            load_turbine_specs(str(tmp_path))

    def test_two_values_per_coefficient_line(self, tmp_path: Path) -> None:
        write_data(tmp_path, coefficients="0.1;0.2\n0.3;0.4\n")
        with pytest.raises(TurbineDataError, match="expected one coefficient per line"):
            load_turbine_specs(str(tmp_path))

    def test_wrong_number_of_coefficients(self, tmp_path: Path) -> None:
        write_data(tmp_path, coefficients="0.1\n0.2\n0.3\n0.4\n0.5\n")
        with pytest.raises(TurbineDataError, match="expected 6 coefficients, got 5"):
            load_turbine_specs(str(tmp_path))

    def test_nan_token_is_not_a_number(self, tmp_path: Path) -> None:
        write_data(tmp_path, power="35;nan;37\n66;67;68\n")
        with pytest.raises(TurbineDataError, match="could not parse numbers"):
            load_turbine_specs(str(tmp_path))

    def test_empty_coefficients_file(self, tmp_path: Path) -> None:
        write_data(tmp_path, coefficients="")
        with pytest.raises(TurbineDataError, match="is empty"):
            load_turbine_specs(str(tmp_path))

    def test_turbine_count_mismatch(self, tmp_path: Path) -> None:
        write_data(tmp_path, flow="70;71\n140;141\n")
        with pytest.raises(TurbineDataError, match="different number of turbines"):
            load_turbine_specs(str(tmp_path))

    def test_is_an_os_error(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_turbine_specs(str(tmp_path))
