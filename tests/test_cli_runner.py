# tests/test_cli_runner.py

"""Tests for the headless CLI generation runner."""

import io
import json
import random
import tempfile
import unittest
from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock, patch

from landingkit.cli.runner import cli_generate
from landingkit.models.content import GenerationOptions
from landingkit.services.image_analysis import ImageAnalysisService
from landingkit.services.pipeline import LandingPagePipeline


def _offline_pipeline(rng: random.Random | None = None) -> LandingPagePipeline:
    writer = MagicMock()
    writer.api_key = ""
    writer.configured = False
    rng = rng or random.Random(5)
    return LandingPagePipeline(
        providers=[],
        image_service=ImageAnalysisService(providers=[], rng=rng),
        copywriter=writer,
        rng=rng,
        clock=lambda: datetime(2025, 3, 1),
    )


class TestCliGenerate(unittest.IsolatedAsyncioTestCase):
    """cli_generate exit codes, output and saved files."""

    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.output_dir = Path(tmp.name)
        patcher = patch(
            "landingkit.cli.runner.LandingPagePipeline",
            side_effect=lambda rng=None: _offline_pipeline(rng),
        )
        patcher.start()
        self.addCleanup(patcher.stop)

    async def test_empty_target_fails(self) -> None:
        code = await cli_generate(
            "   ", GenerationOptions(), "json", str(self.output_dir)
        )
        self.assertEqual(code, 1)
        self.assertEqual(list(self.output_dir.iterdir()), [])

    async def test_json_output_and_saved_file(self) -> None:
        stdout = io.StringIO()
        with patch("sys.stdout", stdout):
            code = await cli_generate(
                "Smart Water Bottle",
                GenerationOptions(),
                "json",
                str(self.output_dir),
                seed=7,
            )
        self.assertEqual(code, 0)

        printed = json.loads(stdout.getvalue())
        self.assertEqual(printed["query"], "Smart Water Bottle")
        self.assertTrue(printed["usedFallback"])
        self.assertIn("hero", printed["content"])

        saved = list(self.output_dir.glob("landing_Smart_Water_Bottle_*.json"))
        self.assertEqual(len(saved), 1)
        self.assertEqual(
            json.loads(saved[0].read_text(encoding="utf-8"))["query"],
            "Smart Water Bottle",
        )

    async def test_table_output(self) -> None:
        with patch("landingkit.cli.runner._print_table") as print_table:
            code = await cli_generate(
                "Smart Water Bottle",
                GenerationOptions(),
                "table",
                str(self.output_dir),
            )
        self.assertEqual(code, 0)
        print_table.assert_called_once()

    async def test_save_failure_still_succeeds(self) -> None:
        with (
            patch(
                "landingkit.storage.file_manager.FileManager.save_result",
                side_effect=OSError("disk full"),
            ),
            patch("sys.stdout", io.StringIO()),
        ):
            code = await cli_generate(
                "Smart Water Bottle",
                GenerationOptions(),
                "json",
                str(self.output_dir),
            )
        self.assertEqual(code, 0)


if __name__ == "__main__":
    unittest.main()
