"""Command line interface for jotl."""
