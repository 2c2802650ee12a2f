"""Tree rendering: walk the configured root and hand entries to a reporter."""

from typing import Optional, TextIO

from dirtree.core.models import TreeConfig
from dirtree.core.walker import walk_tree
from dirtree.filters.gitignore import GitignoreRules
from dirtree.reporters.base import Reporter
from dirtree.reporters.text_reporter import TextTreeReporter


def render_tree(
    config: TreeConfig,
    rules: GitignoreRules,
    output: Optional[TextIO] = None,
    reporter: Optional[Reporter] = None,
) -> int:
    """
    Print the tree for ``config.root``.

    Args:
        config: Tree configuration
        rules: Ignore rules loaded for the root
        output: Stream for the default text reporter (stdout when omitted)
        reporter: Reporter to use instead of the text reporter

    Returns:
        Number of entries printed, excluding the root line

    Raises:
        TreeWalkError: A directory could not be listed
    """
    reporter = reporter or TextTreeReporter(output)
    return reporter.report(config.root, walk_tree(config.root, rules))
