"""
Conformance Test Suite

This suite defines the NORMATIVE behavior of the outfit ledger.
Any compliant implementation MUST pass these tests.

The tests are organized by invariant:
1. invariants.py - No zero/negative quantities, no empty buckets
2. conservation.py - Transfers neither create nor destroy units, and keep wear
3. symmetry.py - Negated transfers are mirror images
4. valuation.py - Cost curve monotonicity, exemptions, quote/commit consistency

These tests use hypothesis for property-based testing.
"""
