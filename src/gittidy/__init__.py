"""git-tidy: keep a git repository and its branches tidy."""
