def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import uwuify.core.interfaces as I

    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert not hasattr(I, "PredicateProtocol")
    assert hasattr(I, "ReplacerProtocol")
    assert hasattr(I, "StageRunnerProtocol")


def test_logger_factory_satisfies_protocol():
    from uwuify.core.interfaces import LoggerFactoryProtocol, LoggerLikeProtocol
    from uwuify.logging import DefaultLoggerFactory

    factory = DefaultLoggerFactory()
    assert isinstance(factory, LoggerFactoryProtocol)
    assert isinstance(factory.get_logger("pipeline"), LoggerLikeProtocol)
