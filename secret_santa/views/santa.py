from __future__ import annotations

from flask import Blueprint, abort, flash, jsonify, redirect, render_template, url_for
from loguru import logger

from ..forms import AddParticipantForm, RemoveParticipantForm
from ..policies import ParticipantStoreMixin
from ..services.assignments import Assignment, AssignmentError

santa_bp = Blueprint("santa", __name__)


def _current_assignment(store) -> Assignment | None:
    try:
        return store.assignment
    except AssignmentError as e:
        logger.error("assignment draw failed: {error}", error=e)
        flash(f"Failed to draw assignments: {e}", "error")
        return None


class GeneratorView(ParticipantStoreMixin):
    def get(self):
        assignment = _current_assignment(self.store)
        rows = [
            (index, name, assignment.recipient_of(index) if assignment else None)
            for index, name in enumerate(self.store.participants)
        ]
        return render_template(
            "santa/generator.html",
            form=AddParticipantForm(),
            remove_form=RemoveParticipantForm(),
            rows=rows,
        )


class AddParticipantView(ParticipantStoreMixin):
    def post(self):
        form = AddParticipantForm()
        if not form.validate_on_submit():
            for errors in form.errors.values():
                for message in errors:
                    flash(message, "error")
            return redirect(url_for("santa.generator"))

        if self.store.is_full:
            flash(f"The list is full ({len(self.store)} participants max).", "error")
            return redirect(url_for("santa.generator"))

        self.store.append(form.name.data)
        _current_assignment(self.store)
        return redirect(url_for("santa.generator"))


class RemoveParticipantView(ParticipantStoreMixin):
    def post(self, index: int):
        form = RemoveParticipantForm()
        if not form.validate_on_submit():
            flash("Could not remove participant, please try again.", "error")
            return redirect(url_for("santa.generator"))

        try:
            self.store.remove_at(index)
        except IndexError:
            abort(404)
        _current_assignment(self.store)
        return redirect(url_for("santa.generator"))


class AssignmentJSONView(ParticipantStoreMixin):
    def get(self):
        try:
            assignment = self.store.assignment
        except AssignmentError as e:
            return jsonify(error=str(e)), 500
        return jsonify(
            participants=list(assignment.participants),
            assignment=[
                {"giver": giver, "recipient": recipient}
                for giver, recipient in assignment.pairs()
            ],
            complete=assignment.is_complete,
        )


# Register routes
santa_bp.add_url_rule("/", view_func=GeneratorView.as_view("generator"))
santa_bp.add_url_rule("/participants", view_func=AddParticipantView.as_view("add_participant"), methods=["POST"])
santa_bp.add_url_rule(
    "/participants/<int:index>/remove",
    view_func=RemoveParticipantView.as_view("remove_participant"),
    methods=["POST"],
)
santa_bp.add_url_rule("/assignment.json", view_func=AssignmentJSONView.as_view("assignment_json"))
