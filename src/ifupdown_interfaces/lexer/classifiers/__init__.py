"""Line classifiers for the interfaces lexer.

Each classifier is a mixin that provides classification logic for
one line type. Classifiers are pure: they never change lexer state.
"""

from ifupdown_interfaces.lexer.classifiers.comment import (
    CommentClassifierMixin,
)
from ifupdown_interfaces.lexer.classifiers.directive import (
    DirectiveClassifierMixin,
    split_options,
)
from ifupdown_interfaces.lexer.classifiers.iface import (
    IfaceClassifierMixin,
)
from ifupdown_interfaces.lexer.classifiers.setting import (
    SettingClassifierMixin,
)

__all__ = [
    "CommentClassifierMixin",
    "DirectiveClassifierMixin",
    "IfaceClassifierMixin",
    "SettingClassifierMixin",
    "split_options",
]
