"""Transient components next to registry singletons.

``C`` is never cached: ``A`` and ``B`` each build their own at construction
time, so their ``C`` values share a prefix but carry different random tokens.
"""

from __future__ import annotations

from layercake import ComponentC, ExtendedRegistry, TestingConfiguration


def main() -> None:
    registry = ExtendedRegistry.testing()

    print(f"a_prefix={registry.a.value.startswith('a-test-c-test-')}")  # => a_prefix=True
    b_prefix = registry.a.value + "-b-test-c-test-"
    print(f"b_prefix={registry.b.value.startswith(b_prefix)}")  # => b_prefix=True
    print(f"a_singleton={registry.a is registry.a}")  # => a_singleton=True
    print(f"c_lifetime={registry.lifetimes['c'].value}")  # => c_lifetime=transient

    configuration = TestingConfiguration()
    first = ComponentC(configuration)
    second = ComponentC(configuration)
    print(f"c_prefix={first.value[:len('c-test-')]}")  # => c_prefix=c-test-
    print(f"token_length={len(first.token)}")  # => token_length=4
    print(f"c_distinct={first is not second}")  # => c_distinct=True


if __name__ == "__main__":
    main()
