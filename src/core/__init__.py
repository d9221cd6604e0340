"""Shared configuration, constants, errors, and typed models."""
