"""
wasteflow Core Module.

Record and graph types, dataset loading, the flow-graph builder and the
summaries derived from built graphs.
"""
