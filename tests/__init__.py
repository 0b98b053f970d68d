"""
Test Suite for Up → Actual Sync

Test Structure:
- fixtures/: Fake Up API and shared helpers
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI and CSV hand-off tests

Test Data:
All test data is synthetic. No test touches the network.
"""
