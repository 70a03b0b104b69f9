"""
Tests for the pre-push block rendering.
"""

from spotless_hook.hooks.template import (
    HOOK_END_MARKER,
    HOOK_START_MARKER,
    contains_hook_block,
    render_hook_block,
)


class TestRenderHookBlock:
    """Tests for render_hook_block."""

    def test_exact_content(self):
        """Test that the block matches the expected script byte for byte."""
        expected = (
            "\n"
            "##### SPOTLESS HOOK START #####\n"
            "SPOTLESS_EXECUTOR=toolX\n"
            "if ! $SPOTLESS_EXECUTOR checkCmd ; then\n"
            '    echo 1>&2 "spotless found problems, running applyCmd; commit the result and re-push"\n'
            "    $SPOTLESS_EXECUTOR applyCmd\n"
            "    exit 1\n"
            "fi\n"
            "##### SPOTLESS HOOK END #####\n"
            "\n"
            "\n"
        )
        assert render_hook_block("toolX", "checkCmd", "applyCmd") == expected

    def test_markers_appear_once(self):
        """Test that each marker is rendered exactly once."""
        block = render_hook_block("./gradlew", "spotlessCheck", "spotlessApply")
        assert block.count(HOOK_START_MARKER) == 1
        assert block.count(HOOK_END_MARKER) == 1

    def test_no_escaping(self):
        """Test that arguments are interpolated verbatim."""
        block = render_hook_block("mvn -q", "spotless:check -P{ci}", "'spotless:apply'")
        assert "SPOTLESS_EXECUTOR=mvn -q\n" in block
        assert "if ! $SPOTLESS_EXECUTOR spotless:check -P{ci} ; then\n" in block
        assert "    $SPOTLESS_EXECUTOR 'spotless:apply'\n" in block


class TestContainsHookBlock:
    """Tests for contains_hook_block."""

    def test_detects_start_marker(self):
        content = "#!/bin/sh\necho hi\n" + HOOK_START_MARKER + "\n"
        assert contains_hook_block(content)

    def test_end_marker_alone_is_not_enough(self):
        assert not contains_hook_block("#!/bin/sh\n" + HOOK_END_MARKER + "\n")

    def test_empty(self):
        assert not contains_hook_block("")
