import sys
import doctest
if __name__ == "__main__":
    raise_on_error = True
    try:
        import wisp
        doctest.testmod(wisp, raise_on_error=raise_on_error)
        import wisp.utils
        doctest.testmod(wisp.utils, raise_on_error=raise_on_error)
        import wisp.weighted_interval
        doctest.testmod(wisp.weighted_interval, raise_on_error=raise_on_error)
        import wisp.buffers
        doctest.testmod(wisp.buffers, raise_on_error=raise_on_error)
        import wisp.solvers
        doctest.testmod(wisp.solvers, raise_on_error=raise_on_error)
        import wisp.select
        doctest.testmod(wisp.select, raise_on_error=raise_on_error)
        import wisp.parsing
        doctest.testmod(wisp.parsing, raise_on_error=raise_on_error)
    except doctest.UnexpectedException as e:
        print("Failed example:")
        print(e.example.lineno, ":", e.example.source)
        print(e.exc_info)
        sys.exit(1)
    except doctest.DocTestFailure as e:
        print("Failed example:")
        print(e.example.lineno, ":", e.example.source)
        print("Expected:", e.example.want)
        print("Got:", e.got)
        sys.exit(1)
