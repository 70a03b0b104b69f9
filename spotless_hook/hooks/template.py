"""
Rendering of the managed pre-push block.

The block is recognised by its start marker, so the text produced here
must stay byte-for-byte stable.
"""

HOOK_START_MARKER = "##### SPOTLESS HOOK START #####"
HOOK_END_MARKER = "##### SPOTLESS HOOK END #####"
SHEBANG = "#!/bin/sh\n"

HOOK_TEMPLATE = '''
{start}
SPOTLESS_EXECUTOR={executor}
if ! $SPOTLESS_EXECUTOR {command_check} ; then
    echo 1>&2 "spotless found problems, running {command_apply}; commit the result and re-push"
    $SPOTLESS_EXECUTOR {command_apply}
    exit 1
fi
{end}


'''


def render_hook_block(executor: str, command_check: str, command_apply: str) -> str:
    """
    Render the spotless block for a pre-push script.

    The arguments are interpolated verbatim, without quoting or escaping.

    Args:
        executor: Tool that runs the check and apply commands
        command_check: Arguments that check for formatting violations
        command_apply: Arguments that fix formatting violations

    Returns:
        The managed block, preceded by one blank line and followed by two
    """
    return HOOK_TEMPLATE.format(
        start=HOOK_START_MARKER,
        end=HOOK_END_MARKER,
        executor=executor,
        command_check=command_check,
        command_apply=command_apply,
    )


def contains_hook_block(content: str) -> bool:
    """Check whether a hook script already carries the spotless block."""
    return HOOK_START_MARKER in content
