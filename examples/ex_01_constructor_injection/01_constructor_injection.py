"""Constructor injection through a composition root.

A ``Registry`` binds one configuration variant, then builds ``A`` and ``B``
from it. Swap the configuration and every derived value follows.
"""

from __future__ import annotations

from layercake import Registry


def main() -> None:
    production = Registry.production()
    print(f"configuration={production.configuration.value}")  # => configuration=production
    print(f"a={production.a.value}")  # => a=a-production
    print(f"b={production.b.value}")  # => b=a-production-b-production

    testing = Registry.testing()
    print(f"configuration={testing.configuration.value}")  # => configuration=test
    print(f"a={testing.a.value}")  # => a=a-test
    print(f"b={testing.b.value}")  # => b=a-test-b-test

    print(f"a_singleton={production.a is production.a}")  # => a_singleton=True
    print(f"b_uses_same_a={production.b.a is production.a}")  # => b_uses_same_a=True


if __name__ == "__main__":
    main()
