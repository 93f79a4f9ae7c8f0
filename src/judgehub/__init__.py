"""JudgeHub core: submission history and per-user statistics.

Identity concerns (accounts, credentials) live in ``judgehub_identity``;
this package only references users by id.
"""
