"""Navigate git branches with a pushd/popd-style stack."""
