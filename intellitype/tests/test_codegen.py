"""Test suite for the Codegen orchestrator."""

from unittest.mock import MagicMock

import pytest

from intellitype.codegen.codegen import Codegen
from intellitype.codegen.emitter import DeclarationEmitter, StubEmitter
from intellitype.config import DocumentConfig
from intellitype.exceptions import ModelLoadError

from .fixtures import MODEL_YAML, PERSON


@pytest.fixture
def model_file(tmp_path):
    """Fixture providing a model document on disk."""
    path = tmp_path / 'model.yaml'
    path.write_text(MODEL_YAML)
    return path


class TestCodegen:
    """Tests for the Codegen class."""

    def test_declaration_output(self, tmp_path, model_file):
        """Test generating a TypeScript declaration file."""
        output = tmp_path / 'Scripts' / 'server.d.ts'
        config = DocumentConfig(source=str(model_file), output=str(output))

        codegen = Codegen(config)
        result = codegen.generate()

        assert isinstance(codegen.emitter, DeclarationEmitter)
        assert str(result) == str(output)
        assert output.read_text() == (
            'declare module server {\n'
            '\n'
            '\tinterface Person{\n'
            '\t\tAge: Number;\n'
            '\t\tTags: Array<String>;\n'
            '}\n'
            '\tinterface Empty{\n'
            '}\n'
            '}\n'
        )

    def test_stub_output(self, tmp_path, model_file):
        """Test generating a JavaScript stub file."""
        output = tmp_path / 'server.js'
        config = DocumentConfig(
            source=str(model_file), output=str(output), namespace='app'
        )

        Codegen(config).generate()

        content = output.read_text()
        assert content.startswith('var app = app || {};\napp.Person = function()  {\n')
        assert '\t/// <field name="Age" type="Number">Age in years.</field>\n' in content
        assert '\tthis.Tags = new Array();\n' in content
        assert 'app.Empty = function()  {\n};\n' in content

    def test_generate_is_repeatable(self, tmp_path, model_file):
        """Test that a second run produces the same file."""
        output = tmp_path / 'server.d.ts'
        config = DocumentConfig(source=str(model_file), output=str(output))

        Codegen(config).generate()
        first = output.read_text()
        Codegen(config).generate()

        assert output.read_text() == first

    def test_render(self):
        """Test rendering in-memory objects without touching the filesystem."""
        config = DocumentConfig(source='unused.yaml', output='server.js')
        codegen = Codegen(config)

        assert isinstance(codegen.emitter, StubEmitter)
        assert codegen.render([PERSON]) == StubEmitter().emit([PERSON])

    def test_custom_loader_and_writer(self):
        """Test that injected collaborators are used."""
        loader = MagicMock()
        loader.load.return_value = (PERSON,)
        writer = MagicMock()
        config = DocumentConfig(
            source='model.yaml', output='out.ts', bracket_generic_arguments=True
        )

        Codegen(config, loader=loader, writer=writer).generate()

        loader.load.assert_called_once_with('model.yaml')
        (path, content), _ = writer.write.call_args
        assert str(path).endswith('out.ts')
        assert content == DeclarationEmitter(bracket_generic_arguments=True).emit(
            [PERSON]
        )

    def test_writer_honours_change_detection_setting(self):
        """Test that the default writer follows the configuration."""
        config = DocumentConfig(
            source='model.yaml', output='out.ts', only_if_changed=False
        )
        assert Codegen(config)._writer.only_if_changed is False

    def test_missing_model(self, tmp_path):
        """Test that a missing model document raises ModelLoadError."""
        config = DocumentConfig(
            source=str(tmp_path / 'missing.yaml'), output=str(tmp_path / 'out.ts')
        )

        with pytest.raises(ModelLoadError):
            Codegen(config).generate()

        assert not (tmp_path / 'out.ts').exists()
