from django.contrib.auth.forms import UserCreationForm
from django.contrib.auth.models import User


class SignUpForm(UserCreationForm):
    """
    Sign-up form asking for a username and an email address.
    """

    class Meta(UserCreationForm.Meta):
        model = User
        fields = ("username", "email")
