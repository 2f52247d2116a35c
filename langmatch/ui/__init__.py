"""
Console interface for the langmatch admin CLI.
"""

try:
    from .helpers import set_verbose, vprint, input_int_in_range, input_user_id
    from .admin import format_profile, show_all_users, show_feed_for_user, explain_pair
    from .visualization import score_matrix, build_compatibility_graph, show_compatibility_graph
except ImportError:
    from ui.helpers import set_verbose, vprint, input_int_in_range, input_user_id
    from ui.admin import format_profile, show_all_users, show_feed_for_user, explain_pair
    from ui.visualization import score_matrix, build_compatibility_graph, show_compatibility_graph

__all__ = [
    "set_verbose",
    "vprint",
    "input_int_in_range",
    "input_user_id",
    "format_profile",
    "show_all_users",
    "show_feed_for_user",
    "explain_pair",
    "score_matrix",
    "build_compatibility_graph",
    "show_compatibility_graph",
]
