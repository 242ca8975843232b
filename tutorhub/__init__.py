"""TutorHub: a peer-to-peer tutoring marketplace API."""

__version__ = "0.1.0"
