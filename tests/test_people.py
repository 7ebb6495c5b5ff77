from dsdrills.people import Birthday, Person


def test_person_describe():
    person = Person("Sbusiso", "Mthimunye")
    assert person.describe() == "First Name: Sbusiso\nLast Name: Mthimunye\n"


def test_names_can_be_set_after_creation():
    person = Birthday()
    person.first = "Sbusiso"
    person.last = "Mthimunye"
    assert person.describe() == "First Name: Sbusiso\nLast Name: Mthimunye\n"


def test_birthday_date_of_birth():
    birthday = Birthday(day=12, month=10, year=2000)
    assert birthday.date_of_birth() == "12/10/2000"


def test_birthday_defaults_to_empty_names():
    birthday = Birthday(day=1, month=2, year=3)
    assert birthday.describe() == "First Name: \nLast Name: \n"
    assert birthday.date_of_birth().split("/") == ["1", "2", "3"]