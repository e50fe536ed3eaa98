"""
Rich-text editor widget for post content.
"""
from django import forms
from django.urls import reverse_lazy


class RichTextEditorWidget(forms.Textarea):
    """
    Textarea backed by a contenteditable editor.

    The editor script copies the editor HTML into the textarea on every
    change and uploads inline images to ``upload_url``.
    """

    template_name = "blog_cms/widgets/rich_text_editor.html"

    class Media:
        css = {"all": ["blog_cms/rich_text_editor.css"]}
        js = ["blog_cms/rich_text_editor.js"]

    def __init__(self, attrs=None, upload_url=None):
        super().__init__(attrs)
        self.upload_url = upload_url or reverse_lazy("blog_cms:api_upload")

    def use_required_attribute(self, initial):
        # The textarea is hidden; the browser cannot focus it to report errors.
        return False

    def get_context(self, name, value, attrs):
        context = super().get_context(name, value, attrs)
        context["widget"]["upload_url"] = str(self.upload_url)
        return context
