"""
Views for django-blog-api.

All views speak JSON. ``ApiView.dispatch`` is the single error boundary:
API errors become ``{"message": ...}`` responses with their status code and
anything unexpected is logged and reported as a generic 500.
"""
import json
import logging

from django.core.exceptions import RequestDataTooBig, TooManyFieldsSent, TooManyFilesSent
from django.http import JsonResponse, QueryDict
from django.http.multipartparser import MultiPartParserError
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from . import exceptions
from .authentication import authenticate_request
from .media import store_image
from .services import AuthService, BlogRepository, ThreadManager
from .tokens import TokenIssuer

logger = logging.getLogger(__name__)


def _read_body(request):
    content_type = request.content_type
    if content_type == "application/json":
        try:
            data = json.loads(request.body or b"{}")
        except ValueError:
            raise exceptions.ValidationError("Malformed JSON body")
        if not isinstance(data, dict):
            raise exceptions.ValidationError("JSON body must be an object")
        return data, {}

    if request.method == "POST":
        # Touching FILES makes Django parse the body now rather than later.
        return request.POST, request.FILES

    if content_type == "multipart/form-data":
        return request.parse_file_upload(request.META, request)

    return QueryDict(request.body, encoding=request.encoding), {}


def parse_body(request):
    """
    Return ``(data, files)`` for JSON, urlencoded or multipart bodies.

    Django only parses form bodies for POST, so other methods are parsed
    here by hand. Bodies Django cannot parse, or that exceed its upload
    limits, are a ValidationError.
    """
    try:
        return _read_body(request)
    except (MultiPartParserError, RequestDataTooBig, TooManyFieldsSent, TooManyFilesSent) as exc:
        logger.warning("Rejected %s body on %s: %s", request.method, request.path, exc)
        raise exceptions.ValidationError("Malformed request body")


@method_decorator(csrf_exempt, name="dispatch")
class ApiView(View):
    """
    Base view for the JSON API.

    Set ``token_required = True`` to gate the view behind a bearer token;
    the verified caller id is then available as ``request.user_id``.
    """

    token_required = False
    token_issuer_class = TokenIssuer

    def dispatch(self, request, *args, **kwargs):
        try:
            if self.token_required:
                authenticate_request(request, self.token_issuer_class())
            return super().dispatch(request, *args, **kwargs)
        except exceptions.ApiError as exc:
            return JsonResponse({"message": exc.message}, status=exc.status_code)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.path)
            return JsonResponse({"message": "Server error"}, status=500)


class RegisterView(ApiView):
    """Create an account with a profile image."""

    def post(self, request):
        data, files = parse_body(request)
        email = data.get("email")
        password = data.get("password")
        image = files.get("profileImage")
        if not email or not password or image is None:
            raise exceptions.ValidationError("All fields are required")

        token, user = AuthService().register(email, password, store_image(image))
        return JsonResponse({"token": token, "user": user}, status=201)


class LoginView(ApiView):
    def post(self, request):
        data, _ = parse_body(request)
        token, user = AuthService().login(data.get("email"), data.get("password"))
        return JsonResponse({"token": token, "user": user})


class BlogListView(ApiView):
    """List the caller's blogs or create a new one."""

    token_required = True

    def get(self, request):
        blogs = BlogRepository().list_by_author(request.user_id)
        return JsonResponse(
            [blog.to_dict(include_comments=False) for blog in blogs],
            safe=False,
        )

    def post(self, request):
        data, files = parse_body(request)
        repository = BlogRepository()
        fields = repository.clean_fields(
            title=data.get("title"),
            description=data.get("description"),
            content=data.get("content"),
        )
        image = files.get("image")
        if image is None:
            raise exceptions.ValidationError("All fields are required")

        blog = repository.create(request.user_id, image=store_image(image), **fields)
        return JsonResponse(blog.to_dict(), status=201)


class BlogDetailView(ApiView):
    """Read, update or delete a single blog."""

    token_required = True

    def get(self, request, pk):
        blog = BlogRepository().get_by_id(pk)
        return JsonResponse(blog.to_dict())

    def put(self, request, pk):
        data, files = parse_body(request)
        repository = BlogRepository()
        patch = {name: data.get(name) for name in ("title", "description", "content")}

        image = files.get("image")
        if image is not None:
            # Only ingest the new image once the caller is known to own the blog.
            repository.get_owned(pk, request.user_id)
            patch["image"] = store_image(image)

        blog = repository.update(pk, request.user_id, patch)
        return JsonResponse(blog.to_dict())

    def delete(self, request, pk):
        BlogRepository().delete(pk, request.user_id)
        return JsonResponse({"message": "Blog deleted"})


class CommentCreateView(ApiView):
    """Add a comment to a blog."""

    token_required = True

    def post(self, request, pk):
        data, _ = parse_body(request)
        comment = ThreadManager().add_comment(pk, request.user_id, data.get("text"))
        return JsonResponse(comment.to_dict(), status=201)


class ReplyCreateView(ApiView):
    """Reply to a comment on a blog."""

    token_required = True

    def post(self, request, blog_pk, comment_pk):
        data, _ = parse_body(request)
        reply = ThreadManager().add_reply(blog_pk, comment_pk, request.user_id, data.get("text"))
        return JsonResponse(reply.to_dict(), status=201)
