"""Tests for table rendering."""

from report import EstimateRecord, estimates_frame, format_bias_table, format_estimates


def _records():
    return [
        EstimateRecord("linear / OLS", 20.827, 0.812),
        EstimateRecord("quadratic / OLS", 25.282, 0.790),
    ]


class TestEstimateTables:
    def test_frame_columns(self):
        df = estimates_frame(_records())
        assert list(df.columns) == ["label", "estimate", "std_error"]
        assert df["estimate"].tolist() == [20.827, 25.282]

    def test_format_estimates(self):
        table = format_estimates(_records())
        assert "linear / OLS" in table
        assert "25.282" in table
        assert "Std. Err." in table

    def test_empty_records(self):
        assert estimates_frame([]).empty


class TestBiasTable:
    def test_format_bias_table(self):
        rows = [{
            "scenario": "quadratic", "estimator": "OLS", "true_effect": 20.0,
            "mean": 25.0, "bias": -5.0, "sd": 0.8, "rmse": 5.06, "n_reps": 10,
        }]
        table = format_bias_table(rows, floatfmt=".2f")
        assert "quadratic" in table
        assert "-5.00" in table
        assert "n_reps" not in table
