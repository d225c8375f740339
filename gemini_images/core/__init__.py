"""Core building blocks: exceptions, logging, schemas, providers and utilities."""
