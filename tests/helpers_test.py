import unittest

from domains import translate_errors, SchemaBuilder, FieldType
from domains import Invalid, InvalidInputError, ResourceNotFoundError, UnpermittedFieldError, BaseError


class RecordInvalid(Exception):
    """ Stands for a persistence-layer validation failure """


class HelpersTest(unittest.TestCase):
    """ Test helpers """

    def setUp(self):
        self.user = SchemaBuilder().field('email', FieldType.STRING, required=True).build()

    def test_translate_errors(self):
        """ Test translate_errors() """
        @translate_errors(RecordInvalid)
        def create_user(data):
            self.user.validate(data, require_strictly=True)
            if data['email'] == u'taken@example.com':
                raise RecordInvalid(u'Validation failed: Email has already been taken')
            return data

        # Fine
        self.assertEqual({'email': u'ann@example.com'}, create_user({'email': u'ann@example.com'}))
        self.assertEqual('create_user', create_user.__name__)

        # Translated
        with self.assertRaises(InvalidInputError) as ctx:
            create_user({'email': u'taken@example.com'})
        e = ctx.exception
        self.assertIsInstance(e, Invalid)
        self.assertEqual(u'Validation failed: Email has already been taken', e.message)
        self.assertEqual(u'Validation failed: Email has already been taken', str(e))
        self.assertIsInstance(e.__cause__, RecordInvalid)

        # Schema errors are not touched
        with self.assertRaises(UnpermittedFieldError):
            create_user({'email': u'ann@example.com', 'admin': True})

        # Other errors are not touched
        @translate_errors(RecordInvalid)
        def find_user(id):
            raise ResourceNotFoundError(id)

        with self.assertRaises(ResourceNotFoundError):
            find_user(1)
        self.assertTrue(issubclass(ResourceNotFoundError, BaseError))
        self.assertFalse(issubclass(ResourceNotFoundError, Invalid))

    def test_translate_nothing(self):
        """ Test translate_errors() with no exception types """
        def f():
            raise RecordInvalid()
        self.assertIs(f, translate_errors()(f))
