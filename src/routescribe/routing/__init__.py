"""Route records and path templates.

Records are produced by the extractor and never change afterwards; the
structure builder turns each one into a ``MethodEntry``.
"""
