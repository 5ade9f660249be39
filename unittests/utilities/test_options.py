from unittest import TestCase

from dataclasses import dataclass

from eulerkit.utilities import UserOptions, UserOptionConfigured


@dataclass
class ExampleOptions(UserOptions):

    threshold: float = 1e-13

    label: str = 'example'

    def override_options(self):
        if self.threshold < 0:
            self.threshold = 0.0


class Example(UserOptionConfigured[ExampleOptions], ExampleOptions):

    def __init__(self, options: ExampleOptions | None = None):
        super().__init__(ExampleOptions, options=options)


class TestUserOptions(TestCase):

    def test_options_dict(self):

        self.assertEqual(ExampleOptions().options_dict, {'threshold': 1e-13, 'label': 'example'})

    def test_override_options(self):

        self.assertEqual(ExampleOptions(threshold=-5).options_dict['threshold'], 0.0)

    def test_apply_options(self):

        class Target:
            pass

        target = Target()

        ExampleOptions(label='applied').apply_options(target)

        self.assertEqual(target.label, 'applied')  # type: ignore
        self.assertEqual(target.threshold, 1e-13)  # type: ignore


class TestUserOptionConfigured(TestCase):

    def test_defaults(self):

        example = Example()

        self.assertEqual(example.threshold, 1e-13)
        self.assertEqual(example.label, 'example')
        self.assertIsInstance(example.original_options, ExampleOptions)

    def test_options(self):

        options = ExampleOptions(threshold=2.0)

        example = Example(options=options)

        self.assertEqual(example.threshold, 2.0)
        self.assertIs(example.original_options, options)

    def test_reset_settings(self):

        example = Example(options=ExampleOptions(label='start'))

        example.label = 'changed'
        example.threshold = 4.0

        example.reset_settings()

        self.assertEqual(example.label, 'start')
        self.assertEqual(example.threshold, 1e-13)
