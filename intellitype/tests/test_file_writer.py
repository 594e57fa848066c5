"""Test writing of generated output."""

import os

import pytest

from intellitype.codegen.file_writer import OutputWriter
from intellitype.exceptions import OutputError


class TestOutputWriter:
    """Tests for the OutputWriter class."""

    def test_write_creates_parent_directories(self, tmp_path):
        """Test that missing directories are created."""
        path = tmp_path / 'Scripts' / 'typings' / 'server.d.ts'

        assert OutputWriter().write(path, 'declare module server {\n\n}\n') is True
        assert path.read_text() == 'declare module server {\n\n}\n'

    def test_unchanged_content_is_not_rewritten(self, tmp_path):
        """Test that identical content leaves the file alone."""
        path = tmp_path / 'server.js'
        writer = OutputWriter()
        writer.write(path, 'var server = server || {};\n')

        os.utime(path, ns=(0, 0))

        assert writer.write(path, 'var server = server || {};\n') is False
        assert path.stat().st_mtime_ns == 0

    def test_changed_content_is_rewritten(self, tmp_path):
        """Test that different content replaces the file."""
        path = tmp_path / 'server.js'
        path.write_text('old')

        assert OutputWriter().write(path, 'new') is True
        assert path.read_text() == 'new'

    def test_always_write(self, tmp_path):
        """Test that change detection can be disabled."""
        path = tmp_path / 'server.js'
        path.write_text('same')

        assert OutputWriter(only_if_changed=False).write(path, 'same') is True

    def test_write_failure(self, tmp_path):
        """Test that OS errors are wrapped in OutputError."""
        blocker = tmp_path / 'file'
        blocker.write_text('not a directory')

        with pytest.raises(OutputError) as exc_info:
            OutputWriter().write(blocker / 'server.js', 'text')

        assert exc_info.value.output_path.endswith('server.js')
        assert isinstance(exc_info.value.cause, OSError)

    def test_undecodable_file_is_rewritten(self, tmp_path):
        """Test that an existing file in another encoding counts as changed."""
        path = tmp_path / 'server.js'
        path.write_bytes(b'caf\xe9')

        assert OutputWriter().write(path, 'x') is True
        assert path.read_text() == 'x'
