"""SDKUTILS test suite.

Folder taxonomy
- unit/  : Isolated, fast checks of a single module/class/function.
- e2e/   : The ``sdkutils`` command driven through Click's CliRunner.

General guidance
- Keep unit tests fast and deterministic (no real I/O outside tmp_path).
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, e2e, property
"""
