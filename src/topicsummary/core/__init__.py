"""
Core reporting modules for topicsummary.

- model: read-only views of a fitted topic model
- ranking: ordering of dense word weights
- adapters: views built from matrices, scikit-learn estimators and snapshots
- reports: report kinds and their registry
- output: writing rendered reports to paths or streams
- utils: configuration and logging
"""
