def test_public_imports() -> None:
    # A lightweight contract test: keep the most common imports stable.
    import loopfpy

    assert hasattr(loopfpy, "__version__")

    from loopfpy import LoopF, Phi, Iabc, Fa, Fb, f_PS, F1C, FA, Gn  # noqa: F401
