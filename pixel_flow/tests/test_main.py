"""
Tests for the command-line entry point (no window opened).
"""
from pixel_flow.main import build_parser, format_manifest, main
from pixel_flow.gameplay.colors import ColorID
from pixel_flow.gameplay.solver import ShooterManifest, SolveResult


class TestFormatManifest:
    """Tests for format_manifest."""

    def test_lines_and_summary(self):
        """One line per shooter plus a summary."""
        result = SolveResult(
            manifest=[ShooterManifest(ColorID.RED, 8), ShooterManifest(ColorID.BLUE, 3)],
            solved=True,
            iterations=2,
        )
        lines = format_manifest(result, lane_count=4)
        assert lines[0] == "  1. lane 1  RED     x8"
        assert lines[1] == "  2. lane 2  BLUE    x3"
        assert lines[-1] == "2 shooters, 11 shots, solved"

    def test_stuck_summary(self):
        """Stuck results say how much is left."""
        result = SolveResult(manifest=[], solved=False, remaining=4)
        assert format_manifest(result, lane_count=4)[-1] == "0 shooters, 0 shots, STUCK (4 cells left)"


class TestMain:
    """Tests for main()."""

    def test_parser_flags(self):
        """CLI flags parse into overrides."""
        args = build_parser().parse_args(["--seed", "3", "--size", "7", "--editor"])
        assert args.seed == 3
        assert args.size == 7
        assert args.editor
        assert not args.solve_only

    def test_solve_only(self, capsys):
        """--solve-only prints the grid and manifest, then exits cleanly."""
        assert main(["--solve-only", "--seed", "3", "--size", "7"]) == 0

        out = capsys.readouterr().out.splitlines()
        assert len(out[0]) == 7
        assert out[-1].endswith("solved")
