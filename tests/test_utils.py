from graphql_crud.utils import lower_case_first_letter


class TestUtils:

    def test_lower_case_first_letter(self):
        assert lower_case_first_letter("Book") == "book"
        assert lower_case_first_letter("BookShelf") == "bookShelf"
        assert lower_case_first_letter("URL") == "uRL"
        assert lower_case_first_letter("b") == "b"
        assert lower_case_first_letter("") == ""
