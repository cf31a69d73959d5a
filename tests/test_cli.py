from pathlib import Path
from unittest.mock import patch, MagicMock

from click.testing import CliRunner

from swag_docs.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliList:
    def test_list_petstore(self):
        runner = CliRunner()
        result = runner.invoke(main, ["list", str(FIXTURES / "petstore.yaml")])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 4
        assert lines[0].startswith("GET")
        assert "List all pets" in lines[0]
        assert "/internal/health" not in result.output

    def test_list_with_search(self):
        runner = CliRunner()
        result = runner.invoke(main, ["list", str(FIXTURES / "petstore.yaml"), "--search", "create"])

        assert result.exit_code == 0
        assert result.output.strip().splitlines() == ["POST    /pets  Create a pet"]

    def test_not_a_spec(self, tmp_path):
        doc = tmp_path / "doc.yaml"
        doc.write_text("info:\n  title: nothing\n")
        runner = CliRunner()
        result = runner.invoke(main, ["list", str(doc)])

        assert result.exit_code == 1
        assert "version tag" in result.output

    def test_no_endpoints(self, tmp_path):
        doc = tmp_path / "doc.yaml"
        doc.write_text("openapi: 3.0.0\npaths: {}\n")
        runner = CliRunner()
        result = runner.invoke(main, ["list", str(doc)])

        assert result.exit_code == 1
        assert "No endpoints found" in result.output


class TestCliGenerate:
    def test_generate_selected_endpoint(self):
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate", str(FIXTURES / "petstore.yaml"),
            "-e", "GET:/pets/{petId}",
            "--no-prompt",
        ])

        assert result.exit_code == 0
        assert "### GET /pets/{petId}" in result.output
        assert "### POST /pets" not in result.output
        assert "Senior Frontend Engineer" not in result.output

    def test_generate_default_prompt(self):
        runner = CliRunner()
        result = runner.invoke(main, ["generate", str(FIXTURES / "petstore.yaml")])

        assert result.exit_code == 0
        assert "Senior Frontend Engineer" in result.output
        assert result.output.index("Senior Frontend Engineer") < result.output.index("# API Documentation")

    def test_generate_custom_prompt_to_file(self, tmp_path):
        prompt = tmp_path / "prompt.md"
        prompt.write_text("Write a Python client.\n", encoding="utf-8")
        output_file = tmp_path / "out" / "reference.md"

        runner = CliRunner()
        result = runner.invoke(main, [
            "generate", str(FIXTURES / "petstore_v2.json"),
            "--prompt-file", str(prompt),
            "-o", str(output_file),
        ])

        assert result.exit_code == 0
        content = output_file.read_text(encoding="utf-8")
        assert content.startswith("Write a Python client.\n\n# API Documentation")
        assert "**Swagger Version:** 2.0" in content

    def test_generate_unknown_endpoint(self):
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate", str(FIXTURES / "petstore.yaml"),
            "-e", "PUT:/orders",
        ])

        assert result.exit_code != 0
        assert "PUT:/orders" in result.output


class TestCliAsk:
    @patch("swag_docs.cli.LlmClient")
    def test_ask_sends_reference(self, MockClient, tmp_path):
        mock_client = MagicMock()
        mock_client.model = "test-model"
        mock_client.integrate.return_value = "export const getPet = ..."
        MockClient.return_value = mock_client

        output_file = tmp_path / "api.ts"
        runner = CliRunner()
        result = runner.invoke(main, [
            "ask", str(FIXTURES / "petstore.yaml"),
            "-e", "GET:/pets",
            "-o", str(output_file),
            "--model", "test-model",
        ])

        assert result.exit_code == 0
        MockClient.assert_called_once_with(model="test-model")
        reference = mock_client.integrate.call_args[0][0]
        instructions = mock_client.integrate.call_args[1]["instructions"]
        assert "Senior Frontend Engineer" in instructions
        assert reference.startswith("# API Documentation")
        assert "### GET /pets\n" in reference
        assert output_file.read_text(encoding="utf-8") == "export const getPet = ..."

    @patch("swag_docs.cli.LlmClient")
    def test_ask_model_from_environment(self, MockClient, tmp_path):
        mock_client = MagicMock()
        mock_client.integrate.return_value = "ok"
        MockClient.return_value = mock_client

        runner = CliRunner()
        result = runner.invoke(
            main,
            ["ask", str(FIXTURES / "petstore.yaml"), "-o", str(tmp_path / "a.md")],
            env={"SWAG_DOCS_MODEL": "env-model"},
        )

        assert result.exit_code == 0
        MockClient.assert_called_once_with(model="env-model")
