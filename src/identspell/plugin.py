"""
Host plugin hook.

A host checker that discovers rules through a ``register_rule`` callable
loads identspell with::

    from identspell.plugin import register
    register(checker)

Installed hosts can also find the hook by convention: it is published as
the ``requireDictionaryWords`` entry point in the ``identspell.plugins``
group. ``identspell.linter.Linter`` is itself such a host.
"""

from identspell.rule import RequireDictionaryWords

PLUGIN_GROUP = "identspell.plugins"


def register(host) -> None:
    """Register the dictionary words rule class with *host*."""
    host.register_rule(RequireDictionaryWords)
