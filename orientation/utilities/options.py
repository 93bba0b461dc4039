# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

from dataclasses import dataclass, fields

from abc import ABCMeta

from typing import Any


@dataclass(frozen=True)
class UserOptions(metaclass=ABCMeta):
    """
    This is an abstract class used to create a dataclass of user options.

    These options are used to set the numeric behavior of the routines that accept them.

    Example:
        :class:`.ToleranceOptions` contains the default thresholds for the conversion routines.

    Subclasses should be frozen dataclasses so that a single instance can be shared as a process wide default.  The
    :meth:`override_options` hook is invoked after construction and can be used to validate or adjust values.

    for example:
        >>> @dataclass(frozen=True)
        >>> class ExampleOptions(UserOptions):
        >>>     example_var : float = 0.5
        >>> print(ExampleOptions().options_dict)
        ...     {'example_var': 0.5}
    """

    def __post_init__(self):
        self.override_options()

    def override_options(self):
        '''
        This method is used for special cases when certain options should be checked or overwritten
        '''
        pass

    @property
    def options_dict(self) -> dict[str, Any]:
        """
        Determine the options input to the dataclass.

        This property method will ignore all internal properties and functions
        """

        return {field.name: getattr(self, field.name) for field in fields(self)}
