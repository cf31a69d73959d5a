"""End-to-end: document file -> CLI -> reference text."""

from pathlib import Path

from click.testing import CliRunner

from swag_docs.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestEndToEnd:
    def test_full_reference_petstore(self, tmp_path):
        output_file = tmp_path / "reference.md"
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate", str(FIXTURES / "petstore.yaml"),
            "--no-prompt",
            "-o", str(output_file),
        ])

        assert result.exit_code == 0
        content = output_file.read_text(encoding="utf-8")

        headings = [line for line in content.splitlines() if line.startswith("### ")]
        assert headings == [
            "### GET /pets",
            "### GET /pets/{petId}",
            "### POST /pets",
            "### DELETE /pets/{petId}",
        ]
        assert content.count("#### Axios Example") == 4
        assert content.count("#### Request Body") == 1
        assert content.count("#### Response Type") == 3
        assert '"limit": {\n    "type": "integer"' in content

    def test_search_narrows_swagger_reference(self):
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate", str(FIXTURES / "petstore_v2.json"),
            "--no-prompt",
            "--search", "status",
        ])

        assert result.exit_code == 0
        assert "### GET /pets/findByStatus" in result.output
        assert "### POST /pets" not in result.output
        assert '"status": {\n    "type": "string",\n    "required": true' in result.output
