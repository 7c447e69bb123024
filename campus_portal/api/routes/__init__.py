"""One router per portal screen."""
