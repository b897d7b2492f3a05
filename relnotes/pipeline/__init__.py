"""
pipeline package
----------------
Stages of a changelog release.

- parser: split a document into header, entries and footer
- resolver: turn the placeholder entry into a dated release entry
- retention: move entries beyond the retention count to the archive
- serializer: reassemble documents with normalized blank lines
- context: ReleaseContext shared by the stages
- changelog: check and edit stages, run_release
- cli: click command-line interface
"""
