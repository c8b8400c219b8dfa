import unittest

from dispatch import ElevatorSnapshot, FirstFitScheduler, PendingBatch, get_scheduler
from elevator_core.status import Direction


def snapshot(elevator_id, direction, taking_requests=True, capacity=4):
    return ElevatorSnapshot(
        elevator_id=elevator_id,
        direction=direction,
        taking_requests=taking_requests,
        capacity=capacity,
    )


class FirstFitSchedulerTest(unittest.TestCase):
    def setUp(self):
        self.scheduler = FirstFitScheduler()

    def test_lowest_index_eligible_elevator_wins(self):
        elevators = [
            snapshot(0, Direction.UP, taking_requests=False),
            snapshot(1, Direction.UP),
            snapshot(2, Direction.UP),
        ]
        assignments = self.scheduler.select_calls(elevators, [PendingBatch(Direction.UP, 3)])
        self.assertEqual(assignments, {Direction.UP: 1})

    def test_direction_must_match(self):
        elevators = [snapshot(0, Direction.UP), snapshot(1, Direction.DOWN)]
        assignments = self.scheduler.select_calls(
            elevators,
            [PendingBatch(Direction.UP, 1), PendingBatch(Direction.DOWN, 2)],
        )
        self.assertEqual(assignments, {Direction.UP: 0, Direction.DOWN: 1})

    def test_batch_without_candidate_is_left_out(self):
        elevators = [snapshot(0, Direction.UP), snapshot(1, Direction.STOPPED, taking_requests=False)]
        assignments = self.scheduler.select_calls(elevators, [PendingBatch(Direction.DOWN, 1)])
        self.assertEqual(assignments, {})

    def test_one_elevator_per_batch(self):
        elevators = [snapshot(0, Direction.DOWN), snapshot(1, Direction.DOWN)]
        assignments = self.scheduler.select_calls(elevators, [PendingBatch(Direction.DOWN, 1)])
        self.assertEqual(assignments, {Direction.DOWN: 0})

    def test_elevator_too_small_for_batch_is_skipped(self):
        elevators = [snapshot(0, Direction.UP, capacity=2), snapshot(1, Direction.UP)]
        assignments = self.scheduler.select_calls(elevators, [PendingBatch(Direction.UP, 3)])
        self.assertEqual(assignments, {Direction.UP: 1})

    def test_batch_too_large_for_every_elevator_waits(self):
        elevators = [snapshot(0, Direction.UP, capacity=2)]
        assignments = self.scheduler.select_calls(elevators, [PendingBatch(Direction.UP, 3)])
        self.assertEqual(assignments, {})


class SchedulerRegistryTest(unittest.TestCase):
    def test_lookup_is_case_insensitive(self):
        self.assertIsInstance(get_scheduler("FIRST_FIT"), FirstFitScheduler)

    def test_unknown_name(self):
        with self.assertRaises(ValueError):
            get_scheduler("scan")


if __name__ == "__main__":
    unittest.main()
