"""Front ends that feed input lines to the Craifter context."""
