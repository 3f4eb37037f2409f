import logging
import os
import sys

current_dir = os.path.dirname(os.path.abspath(__file__))
parent_dir = os.path.dirname(current_dir)
sys.path.insert(0, parent_dir)

from hyperquat import Quaternion, Settings, DivisionByZeroError


def main():
    Settings.configure_logging()
    log = logging.getLogger("hyperquat.demo")

    q1 = Quaternion(1, 2, 3, 4)
    q2 = Quaternion(5, 6, 7, 8)

    print(f"q1 = {q1}")
    print(f"q2 = {q2}")
    print(f"q1 + q2 = {q1.plus(q2)}")
    print(f"q1 * q2 = {q1.times(q2)}")
    print(f"q2 * q1 = {q2.times(q1)}")
    print(f"Inverse of q1 = {q1.inverse()}")
    print(f"Dot product of q1 and q2 = {q1.dot_mult(q2)}")
    print(f"q1 equals q2? {q1.equals(q2)}")
    print(f"Norm of q1 = {q1.norm()}")
    print(f"q1 parsed back from text = {Quaternion.value_of(str(q1))!r}")

    try:
        q1.divide_by_right(Quaternion.ZERO)
    except DivisionByZeroError as e:
        log.warning("Expected failure: %s", e)


if __name__ == "__main__":
    main()
