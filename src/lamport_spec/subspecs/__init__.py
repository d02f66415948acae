"""Subspecifications of the Lamport project: digest, lamport, forgery and pow."""
