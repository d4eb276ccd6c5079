"""Access to Logseq: page files on disk and the HTTP API server."""
