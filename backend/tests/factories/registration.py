"""Factory Boy definition for valid registration submissions."""

from __future__ import annotations

import factory


class RegistrationDataFactory(factory.DictFactory):
    """
    Build snake_case registration mappings that pass every field check.

    Notes
    -----
    - Names are drawn from a fixed list: Faker names may carry apostrophes
      or hyphens, which the name rule rejects.
    - Emails are sequenced so repeated builds never collide.
    """

    first_name = factory.Iterator(["John", "Jane", "Priya", "Arjun"])
    last_name = factory.Iterator(["Doe", "Smith", "Sharma", "Mehta"])
    email = factory.Sequence(lambda n: f"user{n}@example.com")
    phone = "+91 98765-43210"
    date_of_birth = "1990-01-01"
    street = factory.Faker("street_address")
    city = factory.Faker("city")
    state = factory.Faker("state")
    zip_code = factory.Iterator(["560034", "110001", "400050"])
    gender = factory.Iterator(["male", "female", "other"])
    experience = "intermediate"
    interests = factory.LazyFunction(lambda: ["technology", "music"])
    terms = True
    bio = factory.Faker("sentence")
    newsletter = True
